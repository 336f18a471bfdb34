# richerror/__init__.py
"""
richerror - Structured errors and an error catalog code generator

User-facing API:
- RichError: copy-on-write structured error value
- ReadOnlyRichError: read-only contract used for rendering and predicates
- OutputFormat / configure_rendering: how errors render as text
- run_generation: generate constructor modules from an error catalog

Basic usage:
    >>> from richerror import RichError, OutputFormat
    >>> err = RichError.create("NotFound", "resource missing").add_metadata("id", "42")
    >>> print(err.to_string(OutputFormat.DETAILED))

Generating constructors:
    $ richerror generate -i errors.json -o src/myapp -e errors
"""

__version__ = "0.1.0"

from .core.errors import (
    RichError,
    ReadOnlyRichError,
    StackFrame,
    OutputFormat,
    RenderSettings,
    MissingCustomRendererError,
    configure_rendering,
    get_render_settings,
    set_global_custom_output_function,
    set_global_output_format,
)
from .generate import run_generation, GenerationReport

__all__ = [
    "__version__",
    "RichError",
    "ReadOnlyRichError",
    "StackFrame",
    "OutputFormat",
    "RenderSettings",
    "MissingCustomRendererError",
    "configure_rendering",
    "get_render_settings",
    "set_global_custom_output_function",
    "set_global_output_format",
    "run_generation",
    "GenerationReport",
]
