# richerror/catalog/loader.py
"""
Catalog Loader

Reads an error catalog file and turns it into ErrorData entries.

- JSON is the canonical format; .yml/.yaml files are read with PyYAML
- Any failure here is fatal for a generator run (CatalogLoadFailed)
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Union
import json
import logging

import yaml

from richerror.core.errors import RichError, codes
from .models import ErrorData


logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}

Reader = Callable[[Path], bytes]


def _read_file(path: Path) -> bytes:
    return path.read_bytes()


def _load_failed(path: Path, reason: str, cause: Optional[BaseException] = None) -> RichError:
    err = (
        RichError.create(codes.CATALOG_LOAD_FAILED, f"failed to load error catalog {path}: {reason}")
        .add_metadata("path", str(path))
        .add_tag("catalog")
    )
    return err.add_error(cause)


def _check_entry(item: Mapping[str, Any], code: str, path: Path) -> None:
    """Field types of one entry; missing or null optional fields are fine"""
    message = item.get("message")
    if message is not None and not isinstance(message, str):
        raise _load_failed(path, f"entry {code!r}: message must be a string")

    tags = item.get("tags")
    if tags is not None and (not isinstance(tags, list) or not all(isinstance(t, str) for t in tags)):
        raise _load_failed(path, f"entry {code!r}: tags must be a list of strings")

    include_map = item.get("includeMap")
    if include_map is not None and not isinstance(include_map, bool):
        raise _load_failed(path, f"entry {code!r}: includeMap must be true or false")

    metadata = item.get("metaData")
    if metadata is None:
        return
    if not isinstance(metadata, list) or not all(isinstance(m, Mapping) for m in metadata):
        raise _load_failed(path, f"entry {code!r} has malformed metaData")
    for index, data_item in enumerate(metadata):
        if not isinstance(data_item.get("name"), str):
            raise _load_failed(path, f"entry {code!r}: metaData #{index} has no name")
        for key in ("dataType", "importPath"):
            value = data_item.get(key)
            if value is not None and not isinstance(value, str):
                raise _load_failed(path, f"entry {code!r}: metaData #{index} {key} must be a string")


def parse_catalog(raw: Any, path: Path) -> List[ErrorData]:
    """
    Validate the decoded document shape and build entries.

    Args:
        raw: Decoded JSON/YAML document
        path: Source path, for diagnostics

    Raises:
        RichError: CatalogLoadFailed if the document is not a list of
            objects with a non-empty string code and well-typed fields
    """
    if not isinstance(raw, list):
        raise _load_failed(path, f"expected a list of error definitions, got {type(raw).__name__}")

    entries = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise _load_failed(path, f"entry #{index} is not an object")
        code = item.get("code")
        if not isinstance(code, str) or not code.strip():
            raise _load_failed(path, f"entry #{index} has no code")
        _check_entry(item, code, path)
        entries.append(ErrorData.from_dict(item))

    duplicates = [code for code, count in Counter(e.code for e in entries).items() if count > 1]
    for code in duplicates:
        logger.warning(f"Error code '{code}' is defined more than once in {path}")

    return entries


def load_catalog(path: Union[str, Path], reader: Reader = _read_file) -> List[ErrorData]:
    """
    Load an error catalog.

    Args:
        path: Catalog file (.json, .yml or .yaml)
        reader: Filesystem reader, returns the raw bytes of a path

    Returns:
        Entries in file order

    Raises:
        RichError: CatalogLoadFailed on unreadable, malformed or mis-shaped files
    """
    path = Path(path)
    try:
        data = reader(path)
    except OSError as e:
        raise _load_failed(path, str(e), e) from e

    try:
        text = data.decode("utf-8")
        if path.suffix.lower() in YAML_SUFFIXES:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
        raise _load_failed(path, f"malformed document: {e}", e) from e

    entries = parse_catalog(raw, path)
    logger.debug(f"Loaded {len(entries)} error definitions from {path}")
    return entries
