# richerror/generate/generator.py
"""
Error catalog generator pipeline.

A run is a single linear pass with no persisted state:

    Load -> Filter -> {Render -> Validate -> Emit}*

- Load failures abort the run (CatalogLoadFailed propagates)
- Render/validate/write failures skip the entry; the run continues
- Nothing is rolled back: files written before a later failure stay on disk
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
import logging

from richerror.core.errors import RichError, codes
from richerror.catalog import ErrorData, load_catalog, select_entries
from richerror.catalog.filters import TagSpec
from richerror.utils.paths import is_stdout_target
from .renderer import render_error_module
from .sinks import DirectorySink, OutputSink, StdoutSink


logger = logging.getLogger(__name__)


@dataclass
class SkippedEntry:
    code: str
    error_code: str
    reason: str


@dataclass
class GenerationReport:
    """Outcome of one generator run"""
    catalog_path: str = ""
    total: int = 0
    matched: int = 0
    generated: List[str] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)
    skipped: List[SkippedEntry] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped

    def to_dict(self) -> Dict[str, Any]:
        return {
            "catalog_path": self.catalog_path,
            "total": self.total,
            "matched": self.matched,
            "generated": list(self.generated),
            "outputs": list(self.outputs),
            "skipped": [
                {"code": s.code, "error_code": s.error_code, "reason": s.reason}
                for s in self.skipped
            ],
        }


def make_sink(out_dir: Union[str, Path], error_package: str) -> OutputSink:
    """'stdout' selects StdoutSink, anything else is a directory"""
    if is_stdout_target(out_dir):
        return StdoutSink()
    return DirectorySink(out_dir, error_package)


def generate_entries(
    entries: Iterable[ErrorData],
    sink: OutputSink,
    error_package: str = "errors",
    report: Optional[GenerationReport] = None,
) -> GenerationReport:
    """
    Render, validate and emit each entry, isolating failures per entry.

    Args:
        entries: Entries that survived filtering
        sink: Output destination
        error_package: Package name written into generated modules
        report: Report to fill (a new one if None)

    Returns:
        The report, with generated codes and skipped entries
    """
    report = report if report is not None else GenerationReport()
    sink.prepare()

    for entry in entries:
        try:
            unit = render_error_module(entry, error_package)
            target = sink.emit(unit)
        except RichError as err:
            if err.code not in codes.ENTRY_CODES:
                raise
            logger.warning(f"Skipping error '{entry.code}' [{err.code}]: {err.message}")
            report.skipped.append(SkippedEntry(code=entry.code, error_code=err.code, reason=err.message))
            continue

        logger.info(f"Generated code for error code: {entry.code} -> {target}")
        report.generated.append(entry.code)
        report.outputs.append(target)

    return report


def run_generation(
    catalog_path: Union[str, Path],
    out_dir: Union[str, Path] = ".",
    error_package: str = "errors",
    include_tags: TagSpec = None,
    exclude_tags: TagSpec = None,
    sink: Optional[OutputSink] = None,
) -> GenerationReport:
    """
    Run the whole pipeline for one catalog file.

    Args:
        catalog_path: JSON (or YAML) error catalog
        out_dir: Output directory, or "stdout"
        error_package: Package to generate into (<out_dir>/<error_package lower>)
        include_tags: Only generate entries with any of these tags
        exclude_tags: Only generate entries with none of these tags
            (ignored when include_tags is given)
        sink: Explicit sink, overrides out_dir

    Returns:
        GenerationReport

    Raises:
        RichError: CatalogLoadFailed, or OutputWriteFailed if the output
            directory can't be created
    """
    report = GenerationReport(catalog_path=str(catalog_path))

    entries = load_catalog(catalog_path)
    report.total = len(entries)

    selected = select_entries(entries, include_tags, exclude_tags)
    report.matched = len(selected)
    logger.info(f"Generating {report.matched} errors")

    sink = sink if sink is not None else make_sink(out_dir, error_package)
    generate_entries(selected, sink, error_package, report)

    logger.info(
        f"Generated {len(report.generated)} of {report.matched} matched errors"
        + (f", skipped {len(report.skipped)}" if report.skipped else "")
    )
    return report
