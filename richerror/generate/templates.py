# richerror/generate/templates.py
"""
Fixed template for generated error modules.

Placeholders are filled by richerror.generate.renderer; every value is
already valid Python by the time it is substituted.
"""

from __future__ import annotations

from string import Template


GENERATED_WARNING = "# WARNING: This is GENERATED CODE. Please do not edit."

ERROR_CONSTRUCTOR_TEMPLATE = Template('''\
$warning
# Error package: $error_package

from __future__ import annotations

from typing import Any, Dict, Optional

from richerror import ReadOnlyRichError, RichError
$imports

# $constant: $message_comment
$constant = $code_literal


def $constructor($parameters) -> RichError:
    """Create a new $code error."""
    msg = $message_literal
    err = RichError.create($constant, msg)
$mutators
    if include_stack:
        err = err.with_stack(1)
    return err


def $predicate(err: Any) -> bool:
    """Report whether err is a $code error."""
    return isinstance(err, ReadOnlyRichError) and err.get_error_code() == $constant


__all__ = ["$constant", "$constructor", "$predicate"]
''')

PACKAGE_INIT_TEMPLATE = Template('''\
$warning
# Error package: $error_package
''')

STDOUT_BANNER = Template("\n\n************** $code Error Code **************\n\n")
STDOUT_FOOTER = "\n\n****************************************************\n"
