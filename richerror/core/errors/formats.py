# richerror/core/errors/formats.py
"""
Output formats and process-wide render settings.

A RichError renders itself in one of the formats below. Which one `str(err)`
uses is resolved per error: its own override first, then the RenderSettings
object it is bound to (the process-wide default unless another is passed).

The default settings are meant to be configured once at startup, before any
error is constructed, and read on every render afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .contracts import ReadOnlyRichError


logger = logging.getLogger(__name__)

CustomOutputFunc = Callable[["ReadOnlyRichError"], str]


class OutputFormat(str, Enum):
    """Textual output shapes of a rich error"""
    NOT_SPECIFIED = "not_specified"    # defer to settings
    CUSTOM = "custom"                  # user supplied renderer
    DETAILED = "detailed"              # multi-line, no stack / inner errors
    FULL_FORMATTED = "full_formatted"  # everything, one section per line
    FULL_INLINE = "full_inline"        # everything, single line
    SHORT_DETAILED = "short_detailed"  # short + source:line
    SHORT = "short"                    # timestamp - code - message


@dataclass
class RenderSettings:
    """
    Rendering defaults shared by every error bound to this object.

    Errors hold a reference, not a copy, so configure before use.
    """
    output_format: OutputFormat = OutputFormat.FULL_FORMATTED
    custom_renderer: Optional[CustomOutputFunc] = None


_DEFAULT_SETTINGS = RenderSettings()


def get_render_settings() -> RenderSettings:
    """Return the process-wide default settings"""
    return _DEFAULT_SETTINGS


def set_global_output_format(output_format: OutputFormat) -> None:
    _DEFAULT_SETTINGS.output_format = OutputFormat(output_format)
    logger.debug(f"Default rich error output format set to {_DEFAULT_SETTINGS.output_format.value}")


def set_global_custom_output_function(renderer: Optional[CustomOutputFunc]) -> None:
    _DEFAULT_SETTINGS.custom_renderer = renderer
    logger.debug(f"Default rich error custom renderer {'set' if renderer else 'cleared'}")


def configure_rendering(
    output_format: Optional[OutputFormat] = None,
    custom_renderer: Optional[CustomOutputFunc] = None,
) -> RenderSettings:
    """
    Configure the process-wide defaults in one call.

    Args:
        output_format: New default format (unchanged if None)
        custom_renderer: New default custom renderer (unchanged if None)

    Returns:
        The process-wide RenderSettings
    """
    if output_format is not None:
        set_global_output_format(output_format)
    if custom_renderer is not None:
        set_global_custom_output_function(custom_renderer)
    return _DEFAULT_SETTINGS


def reset_rendering() -> None:
    """Restore the built-in defaults (FULL_FORMATTED, no custom renderer)"""
    _DEFAULT_SETTINGS.output_format = OutputFormat.FULL_FORMATTED
    _DEFAULT_SETTINGS.custom_renderer = None
