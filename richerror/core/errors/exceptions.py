# richerror/core/errors/exceptions.py
from __future__ import annotations


class MissingCustomRendererError(RuntimeError):
    """
    CUSTOM output was selected but no renderer is configured.

    This is a setup bug in the consuming application, not a runtime condition:
    richerror never catches it.
    """

    def __init__(self, code: str = "") -> None:
        self.code = code
        super().__init__(
            "CUSTOM output format is selected and no custom output function is set "
            f"for the error{f' {code!r}' if code else ''} or globally"
        )
