# richerror/core/errors/contracts.py
"""
Read-only contract of a rich error.

Anything implementing these methods is rendered as a rich error when it
shows up as an inner error, regardless of its concrete type.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, Tuple, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .formats import OutputFormat
    from .stack import StackFrame


@runtime_checkable
class ReadOnlyRichError(Protocol):
    def get_error_code(self) -> str: ...

    def get_error_message(self) -> str: ...

    def get_stack(self) -> Tuple["StackFrame", ...]: ...

    def get_source(self) -> str: ...

    def get_function(self) -> str: ...

    def get_line_number(self) -> str: ...

    def get_tags(self) -> Tuple[str, ...]: ...

    def get_metadata(self) -> Optional[Mapping[str, Any]]: ...

    def get_metadata_item(self, key: str) -> Tuple[Any, bool]: ...

    def get_errors(self) -> List[BaseException]: ...

    def has_stack(self) -> bool: ...

    def to_string(self, output_format: "OutputFormat") -> str: ...

    def to_custom_string(self) -> str: ...
