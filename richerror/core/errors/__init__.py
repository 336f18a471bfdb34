# richerror/core/errors/__init__.py
"""
Core error types for richerror.

This package defines the components responsible for:
- Representing structured errors (RichError, StackFrame)
- Rendering errors as text (OutputFormat, RenderSettings)
- The error codes richerror itself raises

No side effects on import.
"""

from . import codes
from .contracts import ReadOnlyRichError
from .exceptions import MissingCustomRendererError
from .formats import (
    CustomOutputFunc,
    OutputFormat,
    RenderSettings,
    configure_rendering,
    get_render_settings,
    reset_rendering,
    set_global_custom_output_function,
    set_global_output_format,
)
from .rich import RichError, utc_now
from .stack import MAX_STACK_DEPTH, StackFrame

__all__ = [
    "codes",
    "ReadOnlyRichError",
    "MissingCustomRendererError",
    "CustomOutputFunc",
    "OutputFormat",
    "RenderSettings",
    "configure_rendering",
    "get_render_settings",
    "reset_rendering",
    "set_global_custom_output_function",
    "set_global_output_format",
    "RichError",
    "utc_now",
    "MAX_STACK_DEPTH",
    "StackFrame",
]
