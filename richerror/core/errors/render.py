# richerror/core/errors/render.py
"""
Text renderers for rich errors.

Each renderer emits a section only when the underlying field is set, and
always in the same order.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from .contracts import ReadOnlyRichError
from .formats import OutputFormat

if TYPE_CHECKING:
    from .rich import RichError


SHORT_SEPARATOR = " - "
FORMATTED_SEPARATOR = "\n"
FORMATTED_INDENT = "\t"
INLINE_SEPARATOR = " --- "
INLINE_INDENT = ""


def short_output(err: "RichError", separator: str = SHORT_SEPARATOR) -> str:
    return separator.join((str(err.occurred_at), err.code, err.message))


def short_detailed_output(err: "RichError", separator: str = SHORT_SEPARATOR) -> str:
    return f"{short_output(err, separator)}{separator}{err.source}:{err.line}"


def detailed_output(
    err: "RichError",
    separator: str = FORMATTED_SEPARATOR,
    indent: str = FORMATTED_INDENT,
) -> str:
    """Header, call site, code, message and metadata. Never stack or inner errors."""
    parts: List[str] = [f"ERROR - {err.occurred_at}"]
    if err.source:
        parts.append(f"{separator}SOURCE: {err.source}:{err.line}")
    if err.code:
        parts.append(f"{separator}ERRCODE: {err.code}")
    if err.message:
        parts.append(f"{separator}MESSAGE: {err.message}")
    parts.extend(_metadata_section(err, separator, indent))
    return "".join(parts)


def full_output(err: "RichError", separator: str, indent: str) -> str:
    parts: List[str] = [f"TIMESTAMP: {err.occurred_at}"]
    if err.source:
        parts.append(f"{separator}SOURCE: {err.source}")
    if err.function:
        parts.append(f"{separator}FUNCTION: {err.function}")
    if err.line:
        parts.append(f"{separator}LINE_NUM: {err.line}")
    if err.code:
        parts.append(f"{separator}ERRCODE: {err.code}")
    if err.message:
        parts.append(f"{separator}MESSAGE: {err.message}")
    if err.stack:
        parts.append(f"{separator}STACK:")
        for frame in err.stack:
            parts.append(f"{separator}{indent * frame.depth}{frame}")
    if err.inner_errors:
        parts.append(f"{separator}INNER ERRORS:")
        for index, inner in enumerate(err.inner_errors):
            parts.append(inner_error_string(inner, separator, indent, index))
    parts.extend(_metadata_section(err, separator, indent))
    return "".join(parts)


def full_formatted_output(err: "RichError") -> str:
    return full_output(err, FORMATTED_SEPARATOR, FORMATTED_INDENT)


def full_inline_output(err: "RichError") -> str:
    return full_output(err, INLINE_SEPARATOR, INLINE_INDENT)


def inner_error_string(err: BaseException, separator: str, indent: str, index: int) -> str:
    """Rich-error-shaped inner errors render SHORT_DETAILED, anything else via str()"""
    if isinstance(err, ReadOnlyRichError):
        text = err.to_string(OutputFormat.SHORT_DETAILED)
    else:
        text = str(err)
    return f"{separator}{indent * (index + 1)}ERROR #{index + 1}: {text}"


def _metadata_section(err: "RichError", separator: str, indent: str) -> List[str]:
    if not err.metadata:
        return []
    lines = [f"{separator}METADATA:"]
    for key, value in err.metadata.items():
        lines.append(f"{separator}{indent}{key}: {value}")
    return lines
