# richerror/core/__init__.py
"""
Core building blocks: the rich error value and its rendering.
"""
