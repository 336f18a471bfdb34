# richerror/core/errors/rich.py
"""
RichError: a structured, copy-on-write error value.

Every mutator returns a new RichError; the receiver is never altered, so a
value handed to another holder can't change under it. Containers are kept
as tuples and read-only mappings and copied on write.

Basic usage:
    >>> err = (
    ...     RichError.create("NotFound", "resource missing")
    ...     .add_metadata("id", "42")
    ...     .add_tag("http")
    ...     .with_stack()
    ... )
    >>> err.get_metadata_item("id")
    ('42', True)
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .contracts import ReadOnlyRichError
from .exceptions import MissingCustomRendererError
from .formats import CustomOutputFunc, OutputFormat, RenderSettings, get_render_settings
from . import render
from .stack import StackFrame, capture_stack, short_function_name


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class RichError(Exception):
    """
    Structured error carrying code, message, call site, stack, tags,
    metadata and nested errors.

    Fields are read-only after construction; use the with_*/add_*/set_*
    methods to derive updated values.
    """
    code: str
    message: str
    occurred_at: datetime = field(default_factory=utc_now)

    # Call site
    source: str = ""
    function: str = ""
    line: str = ""

    # Absent until first written
    stack: Optional[Tuple[StackFrame, ...]] = None
    tags: Optional[Tuple[str, ...]] = None
    metadata: Optional[Mapping[str, Any]] = None
    inner_errors: Optional[Tuple[BaseException, ...]] = None

    # Rendering overrides
    output_format: OutputFormat = OutputFormat.NOT_SPECIFIED
    custom_renderer: Optional[CustomOutputFunc] = field(default=None, repr=False)
    settings: Optional[RenderSettings] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        # Containers passed to the constructor are copied into immutable ones
        state = self.__dict__
        if self.metadata is not None and not isinstance(self.metadata, MappingProxyType):
            state["metadata"] = MappingProxyType(dict(self.metadata))
        for name in ("stack", "tags", "inner_errors"):
            value = state[name]
            if value is not None and not isinstance(value, tuple):
                state[name] = tuple(value)
        super().__init__(self.message)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FIELD_NAMES and name in self.__dict__:
            raise AttributeError(
                f"RichError.{name} is read-only; use the with_*/add_*/set_* methods"
            )
        super().__setattr__(name, value)

    def __reduce__(self):
        # mappingproxy can't be pickled; __post_init__ freezes the dict again
        args = tuple(
            dict(value) if isinstance(value, MappingProxyType) else value
            for value in (getattr(self, name) for name in _FIELD_NAMES)
        )
        return (self.__class__, args)

    def __str__(self) -> str:
        return self.to_string(self._effective_output_format())

    # -------- construction --------

    @classmethod
    def create(
        cls,
        code: str,
        message: str,
        *,
        settings: Optional[RenderSettings] = None,
    ) -> "RichError":
        """New error stamped with the current UTC time and nothing else set"""
        return cls(code=code, message=message, settings=settings)

    @classmethod
    def create_with_stack(cls, code: str, message: str, stack_offset: int = 0) -> "RichError":
        """create() followed by with_stack(), anchored at the caller of this method"""
        return cls.create(code, message).with_stack(stack_offset + 1)

    # -------- mutators --------

    def with_stack(self, stack_offset: int = 0) -> "RichError":
        """
        Capture the call stack starting at the caller of with_stack.

        Args:
            stack_offset: Additional frames to skip, e.g. 1 from inside a
                constructor helper so the helper's caller becomes the source

        The first captured frame becomes source/function/line. At most
        MAX_STACK_DEPTH frames are kept.
        """
        frames = capture_stack(stack_offset)
        if not frames:
            return replace(self)
        first = frames[0]
        return replace(
            self,
            source=first.file,
            function=short_function_name(first.function),
            line=str(first.line),
            stack=frames,
        )

    def with_metadata(self, metadata: Optional[Mapping[str, Any]]) -> "RichError":
        frozen = MappingProxyType(dict(metadata)) if metadata is not None else None
        return replace(self, metadata=frozen)

    def add_metadata(self, key: str, value: Any) -> "RichError":
        updated = dict(self.metadata) if self.metadata is not None else {}
        updated[key] = value
        return replace(self, metadata=MappingProxyType(updated))

    def with_errors(self, errors: Iterable[Optional[BaseException]]) -> "RichError":
        new_errors = tuple(err for err in errors if err is not None)
        return replace(self, inner_errors=(self.inner_errors or ()) + new_errors)

    def add_error(self, err: Optional[BaseException]) -> "RichError":
        if err is None:
            return replace(self)
        return replace(self, inner_errors=(self.inner_errors or ()) + (err,))

    def with_tags(self, tags: Iterable[str]) -> "RichError":
        return replace(self, tags=tuple(tags))

    def add_tag(self, tag: str) -> "RichError":
        return replace(self, tags=(self.tags or ()) + (tag,))

    def add_source(self, source: str) -> "RichError":
        return replace(self, source=source)

    def add_function(self, function: str) -> "RichError":
        return replace(self, function=function)

    def add_line_number(self, line_number: str) -> "RichError":
        return replace(self, line=str(line_number))

    def set_custom_output_function(self, renderer: Optional[CustomOutputFunc]) -> "RichError":
        return replace(self, custom_renderer=renderer)

    def set_output_format(self, output_format: OutputFormat) -> "RichError":
        return replace(self, output_format=OutputFormat(output_format))

    # -------- read accessors --------

    def get_error_code(self) -> str:
        return self.code

    def get_error_message(self) -> str:
        return self.message

    def get_occurred_at(self) -> datetime:
        return self.occurred_at

    def get_stack(self) -> Tuple[StackFrame, ...]:
        return self.stack or ()

    def get_source(self) -> str:
        return self.source

    def get_function(self) -> str:
        return self.function

    def get_line_number(self) -> str:
        return self.line

    def get_tags(self) -> Tuple[str, ...]:
        return self.tags or ()

    def get_metadata(self) -> Optional[Mapping[str, Any]]:
        return self.metadata

    def get_metadata_item(self, key: str) -> Tuple[Any, bool]:
        if self.metadata is None or key not in self.metadata:
            return None, False
        return self.metadata[key], True

    def get_errors(self) -> List[BaseException]:
        return list(self.inner_errors or ())

    def has_stack(self) -> bool:
        return bool(self.stack)

    # -------- rendering --------

    def to_string(self, output_format: OutputFormat) -> str:
        if output_format == OutputFormat.CUSTOM:
            return self.to_custom_string()
        if output_format == OutputFormat.DETAILED:
            return render.detailed_output(self)
        if output_format == OutputFormat.FULL_FORMATTED:
            return render.full_formatted_output(self)
        if output_format == OutputFormat.FULL_INLINE:
            return render.full_inline_output(self)
        if output_format == OutputFormat.SHORT_DETAILED:
            return render.short_detailed_output(self)
        # SHORT, and NOT_SPECIFIED when asked for explicitly
        return render.short_output(self)

    def to_custom_string(self) -> str:
        renderer = self._effective_custom_renderer()
        if renderer is None:
            raise MissingCustomRendererError(self.code)
        return renderer(self)

    def _settings(self) -> RenderSettings:
        return self.settings if self.settings is not None else get_render_settings()

    def _effective_output_format(self) -> OutputFormat:
        if self.output_format != OutputFormat.NOT_SPECIFIED:
            return self.output_format
        return self._settings().output_format

    def _effective_custom_renderer(self) -> Optional[CustomOutputFunc]:
        if self.custom_renderer is not None:
            return self.custom_renderer
        return self._settings().custom_renderer

    # -------- serialization --------

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "occurredAt": self.occurred_at.isoformat(),
        }
        if self.source:
            data["source"] = self.source
        if self.function:
            data["function"] = self.function
        if self.line:
            data["line"] = self.line
        data["tags"] = list(self.get_tags())
        if self.stack:
            data["stack"] = [frame.to_dict() for frame in self.stack]
        data["innerErrors"] = [
            inner.to_dict() if isinstance(inner, RichError) else str(inner)
            for inner in self.get_errors()
        ]
        data["metaData"] = dict(self.metadata) if self.metadata is not None else {}
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RichError":
        """
        Rebuild an error from to_dict() output, e.g. one received from another
        process. Inner errors that were plain strings can't be restored and
        are dropped.
        """
        err = cls(
            code=str(data.get("code", "")),
            message=str(data.get("message", "")),
            occurred_at=_parse_timestamp(data.get("occurredAt")),
        )
        if data.get("source"):
            err = err.add_source(data["source"])
        if data.get("function"):
            err = err.add_function(data["function"])
        if data.get("line"):
            err = err.add_line_number(data["line"])
        if data.get("tags"):
            err = err.with_tags(data["tags"])
        if data.get("stack"):
            err = replace(err, stack=tuple(StackFrame.from_dict(f) for f in data["stack"]))
        inner = [cls.from_dict(item) for item in data.get("innerErrors") or () if isinstance(item, Mapping)]
        if inner:
            err = err.with_errors(inner)
        if data.get("metaData"):
            err = err.with_metadata(data["metaData"])
        return err


_FIELD_NAMES = tuple(f.name for f in fields(RichError))


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return utc_now()


__all__ = [
    "RichError",
    "ReadOnlyRichError",
    "utc_now",
]
