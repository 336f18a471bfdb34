# richerror/generate/__init__.py
"""
Code generation from an error catalog.

No side effects on import.
"""

from .generator import GenerationReport, SkippedEntry, generate_entries, make_sink, run_generation
from .renderer import GeneratedUnit, render_error_module
from .sinks import DirectorySink, OutputSink, StdoutSink

__all__ = [
    "GenerationReport",
    "SkippedEntry",
    "generate_entries",
    "make_sink",
    "run_generation",
    "GeneratedUnit",
    "render_error_module",
    "DirectorySink",
    "OutputSink",
    "StdoutSink",
]
