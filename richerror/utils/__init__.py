# richerror/utils/__init__.py
