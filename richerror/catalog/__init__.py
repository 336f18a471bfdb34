# richerror/catalog/__init__.py
"""
Error catalog: models, loading and tag filtering.

No side effects on import.
"""

from .models import DataItem, ErrorData, ERROR_DATA_TYPE
from .loader import load_catalog, parse_catalog
from .filters import filter_by_tags, parse_tags, select_entries

__all__ = [
    "DataItem",
    "ErrorData",
    "ERROR_DATA_TYPE",
    "load_catalog",
    "parse_catalog",
    "filter_by_tags",
    "parse_tags",
    "select_entries",
]
