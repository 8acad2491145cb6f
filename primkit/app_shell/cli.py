import argparse
import dataclasses
import importlib
import inspect
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Any

from primkit.manifest.check import check_structure
from primkit.manifest.generate import (
    COMPONENTS_PACKAGE,
    exported_functions,
    generate_manifest,
    list_components,
)
from primkit.rules.loader import build_component_configs, load_rules

logger = logging.getLogger("cli")

EXIT_NOT_FOUND = 1
EXIT_BAD_ARGUMENTS = 2


def parse_value(raw: str) -> Any:
    """JSON literal if it parses, otherwise the raw string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _coerce_dates(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return value
    return value


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, set | frozenset):
        return sorted(value, key=repr)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def resolve_function(component: str, name: str) -> Any:
    if component not in list_components():
        logger.error(f"Unknown component '{component}'.")
        sys.exit(EXIT_NOT_FOUND)

    if name not in exported_functions(component):
        logger.error(f"Component '{component}' has no function '{name}'.")
        sys.exit(EXIT_NOT_FOUND)

    module = importlib.import_module(f"{COMPONENTS_PACKAGE}.{component}")
    return getattr(module, name)


def handle_list(args: argparse.Namespace) -> None:
    components = [args.component] if args.component else list_components()
    for component in components:
        if component not in list_components():
            logger.error(f"Unknown component '{component}'.")
            sys.exit(EXIT_NOT_FOUND)
        print(f"{component}:")
        for name in exported_functions(component):
            print(f"  {name}")


def handle_call(args: argparse.Namespace) -> None:
    func = resolve_function(args.component, args.function)

    positional = [parse_value(a) for a in args.args]
    keywords: dict[str, Any] = {}
    for item in args.kw:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            logger.error(f"Invalid --kw '{item}', expected KEY=VALUE.")
            sys.exit(EXIT_BAD_ARGUMENTS)
        keywords[key] = parse_value(raw)

    if args.component == "dates":
        positional = [_coerce_dates(v) for v in positional]
        keywords = {k: _coerce_dates(v) for k, v in keywords.items()}

    # Rules apply only where the function takes the matching parameter
    if args.rules:
        overrides = build_component_configs(load_rules(Path(args.rules)))
        params = inspect.signature(func).parameters
        for key, value in overrides.get(args.component, {}).items():
            if key in params and key not in keywords:
                keywords[key] = value

    try:
        result = func(*positional, **keywords)
    except (TypeError, ValueError) as e:
        logger.error(f"{args.component}.{args.function} failed: {e}")
        sys.exit(EXIT_BAD_ARGUMENTS)

    print(json.dumps(result, default=_json_default, ensure_ascii=False))


def handle_manifest(args: argparse.Namespace) -> None:
    print(json.dumps(generate_manifest(), indent=2))


def handle_check(args: argparse.Namespace) -> None:
    violations = check_structure()
    if violations:
        print("Structure Violations Found:")
        for v in violations:
            print(f"  - {v}")
        sys.exit(1)
    print("Component Structure Check: PASS")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="primkit", description="primkit utility functions")
    parser.add_argument("--rules", help="Path to a rules YAML file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    list_parser = subparsers.add_parser("list", help="List exported functions")
    list_parser.add_argument("component", nargs="?", help="Only this component")

    # call
    call_parser = subparsers.add_parser("call", help="Call a function with JSON arguments")
    call_parser.add_argument("component", help="Component name, e.g. numeric")
    call_parser.add_argument("function", help="Function name, e.g. clamp")
    call_parser.add_argument("args", nargs="*", help="Positional arguments as JSON literals")
    call_parser.add_argument(
        "--kw", action="append", default=[], help="Keyword argument as KEY=VALUE"
    )

    # manifest
    subparsers.add_parser("manifest", help="Print the component manifest as JSON")

    # check
    subparsers.add_parser("check", help="Verify component package structure")

    return parser


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    if args.command == "list":
        handle_list(args)
    elif args.command == "call":
        handle_call(args)
    elif args.command == "manifest":
        handle_manifest(args)
    elif args.command == "check":
        handle_check(args)


if __name__ == "__main__":
    main()
