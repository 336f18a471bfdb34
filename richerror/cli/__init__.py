# richerror/cli/__init__.py
