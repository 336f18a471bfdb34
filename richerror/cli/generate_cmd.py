# richerror/cli/generate_cmd.py
"""
`richerror generate` command

Generates one Python module per catalog entry, each with an error code
constant, a constructor and a predicate.
"""

from __future__ import annotations

import sys

from ..config import load_config, apply_rendering_config
from ..core.errors import OutputFormat, RichError
from ..generate import run_generation


FLAG_ERRORS_DEFINITION_FILE = "--errors-definition-file"
FLAG_OUT_DIR = "--out-dir"
FLAG_OUTPUT_ERROR_PKG = "--output-error-pkg"
FLAG_INCLUDE_TAGS = "--include-tags"
FLAG_EXCLUDE_TAGS = "--exclude-tags"


def register_command(subparsers):
    """Register the 'generate' command"""
    gen_p = subparsers.add_parser(
        "generate",
        help="Generate error constructors and code constants from an error catalog",
    )
    gen_p.add_argument("-i", FLAG_ERRORS_DEFINITION_FILE, dest="errors_definition_file",
                       help="Path to the errors definition file (JSON or YAML)")
    gen_p.add_argument("-o", FLAG_OUT_DIR, dest="out_dir",
                       help="Output directory for generated files; 'stdout' prints them "
                            "(default: config value or '.')")
    gen_p.add_argument("-e", FLAG_OUTPUT_ERROR_PKG, dest="error_package",
                       help="Package to generate the error modules into (default: config value or 'errors')")
    gen_p.add_argument("-t", FLAG_INCLUDE_TAGS, dest="include_tags",
                       help="Only generate errors with any of these comma separated tags. "
                            f"Mutually exclusive with {FLAG_EXCLUDE_TAGS}")
    gen_p.add_argument("-x", FLAG_EXCLUDE_TAGS, dest="exclude_tags",
                       help="Skip errors with any of these comma separated tags. "
                            f"Mutually exclusive with {FLAG_INCLUDE_TAGS}")
    gen_p.set_defaults(func=generate_errors)
    return gen_p


def generate_errors(args) -> int:
    """Run the generator with CLI flags over config defaults"""
    config = load_config(getattr(args, "config", None))
    apply_rendering_config(config)
    defaults = config.generate

    definition_file = args.errors_definition_file or defaults.errors_definition_file
    if not definition_file:
        print(f"Error: {FLAG_ERRORS_DEFINITION_FILE} is required (or set generate.errors_definition_file in config)",
              file=sys.stderr)
        return 2

    include_tags = args.include_tags if args.include_tags is not None else list(defaults.include_tags)
    exclude_tags = args.exclude_tags if args.exclude_tags is not None else list(defaults.exclude_tags)

    try:
        report = run_generation(
            definition_file,
            out_dir=args.out_dir or defaults.out_dir,
            error_package=args.error_package or defaults.error_package,
            include_tags=include_tags,
            exclude_tags=exclude_tags,
        )
    except RichError as err:
        print(err.to_string(OutputFormat.DETAILED), file=sys.stderr)
        return 1

    # Summary goes to stderr so 'stdout' output stays pure generated code
    print(f"\n{report.matched} of {report.total} errors matched, "
          f"{len(report.generated)} generated", file=sys.stderr)
    for skipped in report.skipped:
        print(f"  [SKIPPED] {skipped.code}: {skipped.reason}", file=sys.stderr)
    return 0
