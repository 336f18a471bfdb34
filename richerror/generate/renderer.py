# richerror/generate/renderer.py
"""
Render one catalog entry into a Python module.

Render -> Validate: the filled template is compiled before it is handed to
a sink, so a bad catalog entry never produces a broken file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from richerror.core.errors import RichError, codes
from richerror.catalog.models import DataItem, ErrorData
from . import naming
from .templates import ERROR_CONSTRUCTOR_TEMPLATE, GENERATED_WARNING, PACKAGE_INIT_TEMPLATE


logger = logging.getLogger(__name__)

# Locals and parameters of the generated constructor
RESERVED_PARAMETER_NAMES = frozenset({"err", "msg", "fields", "include_stack"})

ERROR_ANNOTATION = "Optional[BaseException]"
MAP_PARAMETER = "fields: Optional[Dict[str, Any]] = None"
STACK_PARAMETER = "include_stack: bool = False"

_INDENT = "    "


@dataclass(frozen=True)
class GeneratedUnit:
    """Validated source for one catalog entry"""
    code: str
    filename: str
    source: str


def _entry_failed(entry: ErrorData, error_code: str, reason: str, cause: Optional[BaseException] = None) -> RichError:
    return (
        RichError.create(error_code, f"error '{entry.code}': {reason}")
        .add_metadata("code", entry.code)
        .add_tag("generate")
        .add_error(cause)
    )


def import_lines(items: List[DataItem]) -> List[str]:
    """Unique import statements for the items' import paths, sorted"""
    modules = {item.import_path.strip() for item in items if item.import_path.strip()}
    return [f"import {module}" for module in sorted(modules)]


def _comment(text: str) -> str:
    return " ".join(text.split())


def _check_code(entry: ErrorData) -> None:
    if not naming.to_snake_case(entry.code):
        raise _entry_failed(
            entry, codes.TEMPLATE_EXECUTION_FAILED,
            "code has no letters or digits to build Python names from",
        )


def _check_parameters(entry: ErrorData) -> None:
    seen = set()
    for item in entry.metadata:
        if not naming.is_valid_parameter_name(item.name):
            raise _entry_failed(
                entry, codes.TEMPLATE_EXECUTION_FAILED,
                f"metadata name {item.name!r} is not a valid parameter name",
            )
        if item.name in RESERVED_PARAMETER_NAMES:
            raise _entry_failed(
                entry, codes.TEMPLATE_EXECUTION_FAILED,
                f"metadata name {item.name!r} is reserved by the generated constructor",
            )
        if item.name in seen:
            raise _entry_failed(
                entry, codes.TEMPLATE_EXECUTION_FAILED,
                f"metadata name {item.name!r} is used more than once",
            )
        seen.add(item.name)


def template_values(entry: ErrorData, error_package: str) -> Dict[str, str]:
    """Build the substitution mapping for ERROR_CONSTRUCTOR_TEMPLATE"""
    _check_code(entry)
    _check_parameters(entry)

    parameters = []
    for item in entry.metadata:
        annotation = ERROR_ANNOTATION if item.is_error else item.data_type.strip()
        parameters.append(f"{item.name}: {annotation}")
    if entry.include_map:
        parameters.append(MAP_PARAMETER)
    parameters.append(STACK_PARAMETER)

    mutators = []
    if entry.include_map:
        mutators.append(f"{_INDENT}if fields is not None:")
        mutators.append(f"{_INDENT * 2}err = err.with_metadata(fields)")
    for item in entry.metadata:
        if item.is_error:
            mutators.append(f"{_INDENT}err = err.add_error({item.name})")
        else:
            mutators.append(f"{_INDENT}err = err.add_metadata({item.name!r}, {item.name})")
    if entry.tags:
        mutators.append(f"{_INDENT}err = err.with_tags({list(entry.tags)!r})")

    return {
        "warning": GENERATED_WARNING,
        "error_package": _comment(error_package),
        "imports": "\n".join(import_lines(list(entry.metadata))),
        "constant": naming.constant_name(entry.code),
        "constructor": naming.constructor_name(entry.code),
        "predicate": naming.predicate_name(entry.code),
        "code": _comment(entry.code),
        "code_literal": repr(entry.code),
        "message_literal": repr(entry.message),
        "message_comment": _comment(entry.message),
        "parameters": ", ".join(parameters),
        "mutators": "\n".join(mutators),
    }


def validate_source(entry: ErrorData, source: str, filename: str) -> None:
    """
    Compile the generated module without running it.

    Raises:
        RichError: SourceValidationFailed on syntax errors (bad data types,
            duplicate arguments, ...)
    """
    try:
        compile(source, filename, "exec")
    except (SyntaxError, ValueError) as e:
        raise _entry_failed(entry, codes.SOURCE_VALIDATION_FAILED, f"generated code does not compile: {e}", e) from e


def render_error_module(entry: ErrorData, error_package: str = "errors") -> GeneratedUnit:
    """
    Render and validate the module for one catalog entry.

    Args:
        entry: Catalog entry
        error_package: Name of the package the module is generated into

    Returns:
        GeneratedUnit with the module source and its file name

    Raises:
        RichError: TemplateExecutionFailed or SourceValidationFailed
    """
    values = template_values(entry, error_package)
    try:
        source = ERROR_CONSTRUCTOR_TEMPLATE.substitute(values)
    except (KeyError, ValueError) as e:
        raise _entry_failed(entry, codes.TEMPLATE_EXECUTION_FAILED, f"template execution failed: {e}", e) from e

    filename = naming.module_filename(entry.code)
    validate_source(entry, source, filename)
    logger.debug(f"Rendered {filename} for error code {entry.code}")
    return GeneratedUnit(code=entry.code, filename=filename, source=source)


def render_package_init(error_package: str) -> str:
    return PACKAGE_INIT_TEMPLATE.substitute(
        warning=GENERATED_WARNING,
        error_package=_comment(error_package),
    )
