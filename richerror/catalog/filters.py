# richerror/catalog/filters.py
"""
Tag filters for catalog entries.

Tags compare case-insensitively after trimming whitespace.
Include and exclude are mutually exclusive; when both are given the include
filter is applied and the exclude filter is ignored.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union
import logging

from .models import ErrorData


logger = logging.getLogger(__name__)

TagSpec = Union[str, Iterable[str], None]


def normalize_tag(tag: str) -> str:
    return tag.strip().lower()


def parse_tags(tags: TagSpec) -> List[str]:
    """
    Normalize a tag filter.

    Accepts a comma separated string ("http, db") or an iterable of tags.
    Empty tags are dropped.
    """
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    return [normalize_tag(tag) for tag in tags if tag and tag.strip()]


def first_matching_tag(entry: ErrorData, tags: Sequence[str]) -> Optional[str]:
    """Return the first entry tag found in `tags` (already normalized), or None"""
    wanted = set(tags)
    for tag in entry.tags:
        normalized = normalize_tag(tag)
        if normalized in wanted:
            return normalized
    return None


def filter_by_tags(entries: Iterable[ErrorData], tags: TagSpec, include: bool = True) -> List[ErrorData]:
    """
    Keep entries that have (include=True) or lack (include=False) any of `tags`.

    Args:
        entries: Catalog entries, order preserved
        tags: Filter tags, comma separated string or iterable
        include: Include mode if True, exclude mode otherwise

    Returns:
        Matching entries
    """
    wanted = parse_tags(tags)
    matching = []
    for entry in entries:
        matched_tag = first_matching_tag(entry, wanted)
        if include and matched_tag is not None:
            logger.info(f"Added for generation: error '{entry.code}' has matching tag '{matched_tag}'")
            matching.append(entry)
        elif not include and matched_tag is None:
            logger.info(f"Added for generation: error '{entry.code}' has none of the excluded tags")
            matching.append(entry)
    logger.info(f"{len(matching)} errors matched the tags provided")
    return matching


def select_entries(
    entries: Sequence[ErrorData],
    include_tags: TagSpec = None,
    exclude_tags: TagSpec = None,
) -> List[ErrorData]:
    """
    Apply the include or exclude filter, or none.

    Include takes precedence if both are supplied.
    """
    include = parse_tags(include_tags)
    exclude = parse_tags(exclude_tags)

    if include and exclude:
        logger.warning(
            f"Both include tags {include} and exclude tags {exclude} given; "
            f"they are mutually exclusive, applying include tags only"
        )
    if include:
        logger.info(f"Include tags specified, generating only errors tagged: {', '.join(include)}")
        return filter_by_tags(entries, include, include=True)
    if exclude:
        logger.info(f"Exclude tags specified, generating only errors not tagged: {', '.join(exclude)}")
        return filter_by_tags(entries, exclude, include=False)
    return list(entries)
