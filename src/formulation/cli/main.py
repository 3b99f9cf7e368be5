"""
CLI to validate a model against a form config from the command line.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from formulation import Form, list_rules
from formulation.config import load_form_config, load_settings
from formulation.errors import FormulationError

EXIT_VALID = 0
EXIT_ERROR = 1
EXIT_INVALID = 2


def build_parser():
    parser = argparse.ArgumentParser(
        prog="formulation",
        description="Validate form values against a declarative rule schema",
    )

    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        help="Path to the JSON form config (schema, messages, validateOn)",
    )
    parser.add_argument(
        "model",
        type=Path,
        nargs="?",
        help="Path to the JSON file with field values",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print JSON output",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        help="Settings file (default: .env)",
    )
    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List built-in rules and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    return parser


def print_rules():
    """Print built-in rules."""
    print("\nBuilt-in rules:")
    print("=" * 50)

    for name, description in list_rules().items():
        print(f"  {name:<15} {description}")

    print()


def load_model(path: Path) -> dict:
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Model file {path} must be a JSON object")
    return data


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_rules:
        print_rules()
        sys.exit(EXIT_VALID)

    if not args.config:
        parser.error("config is required")

    if not args.model:
        parser.error("model is required")

    try:
        settings = load_settings(args.env_file)
    except FormulationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    for path in (args.config, args.model):
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            sys.exit(EXIT_ERROR)

    try:
        config = load_form_config(args.config, settings)
        values = load_model(args.model)
        form = Form(config)
    except (FormulationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    form.set_initial_model(values)
    result = form.validate_form()

    indent = 2 if args.pretty else None
    output = json.dumps(result.model_dump(by_alias=True), indent=indent, default=str)

    if args.output:
        args.output.write_text(output)
    else:
        print(output)

    sys.exit(EXIT_VALID if result.is_valid else EXIT_INVALID)


if __name__ == "__main__":
    main()
