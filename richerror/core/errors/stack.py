# richerror/core/errors/stack.py
"""
Call stack capture for rich errors.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple
import sys


# Deeper stacks are truncated silently.
MAX_STACK_DEPTH = 10

# Frames owned by richerror between the caller and the walk:
# capture_stack itself and the RichError.with_stack call.
_BASE_STACK_OFFSET = 2


@dataclass(frozen=True)
class StackFrame:
    """One captured frame. depth 0 is the immediate caller of the capture point."""
    depth: int
    instruction: int
    file: str
    function: str
    line: int

    def __str__(self) -> str:
        return f"L:{self.depth} {self.instruction} - {self.file}:{self.line} - {self.function}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StackFrame":
        return cls(
            depth=int(data.get("depth", 0)),
            instruction=int(data.get("instruction", 0)),
            file=str(data.get("file", "")),
            function=str(data.get("function", "")),
            line=int(data.get("line", 0)),
        )


def capture_stack(stack_offset: int = 0) -> Tuple[StackFrame, ...]:
    """
    Walk the current call stack.

    Must be called directly from the method that owns the capture
    (RichError.with_stack); that method and this function are skipped.

    Args:
        stack_offset: Extra frames to skip above the caller

    Returns:
        Up to MAX_STACK_DEPTH frames, innermost first. Empty when the
        offset reaches past the outermost frame.
    """
    try:
        frame = sys._getframe(_BASE_STACK_OFFSET + max(stack_offset, 0))
    except ValueError:
        return ()

    frames = []
    depth = 0
    while frame is not None and depth < MAX_STACK_DEPTH:
        code = frame.f_code
        frames.append(
            StackFrame(
                depth=depth,
                instruction=frame.f_lasti,
                file=code.co_filename,
                function=getattr(code, "co_qualname", code.co_name),
                line=frame.f_lineno or 0,
            )
        )
        frame = frame.f_back
        depth += 1
    return tuple(frames)


def short_function_name(function: str) -> str:
    """'Outer.method' -> 'method'"""
    return function.rsplit(".", 1)[-1]
