# richerror/generate/naming.py
"""
Naming rules for generated code.

    NotFound      -> not_found      (module file: notfound.py)
    HTTPTimeout   -> http_timeout
    ERR_CODE_NOT_FOUND, new_not_found_error, is_not_found_error
"""

from __future__ import annotations

import keyword
import re


_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_IDENTIFIER = re.compile(r"[^0-9a-zA-Z]+")
_NON_FILENAME = re.compile(r"[^0-9a-zA-Z_]+")


def to_snake_case(name: str) -> str:
    snake = _ACRONYM_BOUNDARY.sub(r"\1_\2", name.strip())
    snake = _WORD_BOUNDARY.sub(r"\1_\2", snake)
    snake = _NON_IDENTIFIER.sub("_", snake)
    return snake.strip("_").lower()


def constant_name(code: str) -> str:
    return f"ERR_CODE_{to_snake_case(code).upper()}"


def constructor_name(code: str) -> str:
    return f"new_{to_snake_case(code)}_error"


def predicate_name(code: str) -> str:
    return f"is_{to_snake_case(code)}_error"


def module_filename(code: str) -> str:
    """Letters, digits and underscores of the code, lower-cased; path separators never survive"""
    return f"{_NON_FILENAME.sub('', code).lower()}.py"


def is_valid_parameter_name(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)
