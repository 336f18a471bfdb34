# richerror/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- error codes raised by richerror itself (stable public contract) ----
# catalog
CATALOG_LOAD_FAILED: Final[str] = "CatalogLoadFailed"

# per-entry generation
TEMPLATE_EXECUTION_FAILED: Final[str] = "TemplateExecutionFailed"
SOURCE_VALIDATION_FAILED: Final[str] = "SourceValidationFailed"
OUTPUT_WRITE_FAILED: Final[str] = "OutputWriteFailed"


# ---- semantic groups ----

# Failures isolated to a single catalog entry; the run skips the entry and continues.
ENTRY_CODES: Final[set[str]] = {
    TEMPLATE_EXECUTION_FAILED,
    SOURCE_VALIDATION_FAILED,
    OUTPUT_WRITE_FAILED,
}
