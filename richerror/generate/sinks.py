# richerror/generate/sinks.py
"""
Output sinks for generated modules

Implementations:
- StdoutSink: one combined stream, units separated by banners
- DirectorySink: one file per entry under <out_dir>/<error package>/
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO, Union
import logging
import sys

from richerror.core.errors import RichError, codes
from richerror.utils.paths import dir_exists, ensure_dir, package_dir
from .renderer import GeneratedUnit, render_package_init
from .templates import STDOUT_BANNER, STDOUT_FOOTER


logger = logging.getLogger(__name__)


class OutputSink(ABC):
    """Destination for generated units"""

    def prepare(self) -> None:
        """Called once before the first unit is emitted"""

    @abstractmethod
    def emit(self, unit: GeneratedUnit) -> str:
        """
        Write one unit.

        Returns:
            Where the unit went (file path or stream name)

        Raises:
            RichError: OutputWriteFailed
        """


class StdoutSink(OutputSink):
    """Print every unit to a text stream (stdout by default)"""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected/captured stdout is honored
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, unit: GeneratedUnit) -> str:
        try:
            self.stream.write(STDOUT_BANNER.substitute(code=unit.code))
            self.stream.write(unit.source)
            self.stream.write(STDOUT_FOOTER)
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeEncodeError and writes to a closed stream
            raise (
                RichError.create(
                    codes.OUTPUT_WRITE_FAILED,
                    f"failed to print error code {unit.code}: {e}",
                )
                .add_metadata("code", unit.code)
                .add_metadata("path", "<stdout>")
                .add_tag("generate")
                .add_error(e)
            ) from e
        return "<stdout>"


class DirectorySink(OutputSink):
    """Write <out_dir>/<error_package>/<code lower>.py, creating directories as needed"""

    def __init__(self, out_dir: Union[str, Path], error_package: str = "errors"):
        self.error_package = error_package
        self.directory = package_dir(out_dir, error_package)

    def prepare(self) -> None:
        """
        Create the package directory and its __init__.py.

        Raises:
            RichError: OutputWriteFailed; nothing can be written, so the run aborts
        """
        if not dir_exists(self.directory):
            logger.info(f"Creating output directory {self.directory}")
        init_file = self.directory / "__init__.py"
        try:
            ensure_dir(self.directory)
            if not init_file.exists():
                init_file.write_text(render_package_init(self.error_package), encoding="utf-8")
        except OSError as e:
            raise (
                RichError.create(codes.OUTPUT_WRITE_FAILED, f"failed to prepare output directory {self.directory}: {e}")
                .add_metadata("path", str(self.directory))
                .add_tag("generate")
                .add_error(e)
            ) from e

    def emit(self, unit: GeneratedUnit) -> str:
        path = self.directory / unit.filename
        try:
            ensure_dir(path.parent)
            path.write_text(unit.source, encoding="utf-8")
        except OSError as e:
            raise (
                RichError.create(
                    codes.OUTPUT_WRITE_FAILED,
                    f"failed to write {path} for error code {unit.code}: {e}",
                )
                .add_metadata("code", unit.code)
                .add_metadata("path", str(path))
                .add_tag("generate")
                .add_error(e)
            ) from e
        return str(path)
