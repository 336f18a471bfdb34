# richerror/utils/paths.py
"""
Shared path utilities for richerror.

- No hidden side-effects in "*_exists" helpers (they don't create directories).
- Prefer pathlib.Path throughout; convert to str only at CLI edges if needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


# Output directory keyword that prints generated code instead of writing files
STDOUT_KEYWORD = "stdout"


def dir_exists(path: Union[str, Path]) -> bool:
    return Path(path).is_dir()


def ensure_dir(path: Union[str, Path]) -> Path:
    """Create `path` and its parents if absent. Returns the path."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def is_stdout_target(out_dir: Union[str, Path, None]) -> bool:
    return str(out_dir).strip().lower() == STDOUT_KEYWORD if out_dir is not None else False


def package_dir(out_dir: Union[str, Path], error_package: str) -> Path:
    """<out_dir>/<error_package lower-cased>"""
    return Path(out_dir) / error_package.strip().lower()
