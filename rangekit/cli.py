#!/usr/bin/env python3
"""
rangekit - composable lazy ranges

Command-line interface for inspecting named and ad-hoc range definitions.
Every range shown is bounded by --limit, so unbounded ranges terminate.
"""
import sys
import argparse
import json
import logging
from pathlib import Path
from typing import Any, List
from rich.console import Console
from rich.table import Table

from rangekit.config import init_config, get_config
from rangekit.ranges import Range, RangeRegistry, parse_range, take

logger = logging.getLogger(__name__)


console = Console()


def collect(rng: Range, limit: int) -> List[Any]:
    """Materialize at most `limit` elements of a range."""
    return list(take(rng, limit))


def output_elements(title: str, elements: List[Any], format: str = "table"):
    """Output range elements in the specified format."""
    if format == "table":
        table = Table(title=title)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Value", style="green")

        for index, element in enumerate(elements):
            table.add_row(str(index), repr(element))

        console.print(table)
    elif format == "json":
        print(json.dumps(elements, default=repr))
    else:  # plain
        for element in elements:
            print(element)


def build_registry(args) -> RangeRegistry:
    """Registry with built-ins plus the configured views file, if any."""
    registry = RangeRegistry()
    views_file = args.views or get_config().views_file
    if views_file:
        count = registry.load_file(Path(views_file))
        logger.info(f"Loaded {count} ranges from {views_file}")
    return registry


def cmd_list(args):
    """List named ranges."""
    registry = build_registry(args)
    info = registry.info()

    if args.output == "json":
        print(json.dumps(info["ranges"], indent=2))
        return

    if args.output == "plain":
        for entry in info["ranges"]:
            print(entry["name"])
        return

    table = Table(title="Ranges")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="green")
    table.add_column("Built-in", style="yellow")

    for entry in info["ranges"]:
        table.add_row(entry["name"], entry["description"], "yes" if entry["builtin"] else "")

    console.print(table)


def cmd_show(args):
    """Show the first elements of a named range."""
    registry = build_registry(args)
    rng = registry.get(args.name)
    output_elements(args.name, collect(rng, args.limit), args.output)


def cmd_eval(args):
    """Evaluate an ad-hoc YAML range definition."""
    registry = build_registry(args)
    rng = parse_range(args.definition, registry)
    output_elements(repr(rng), collect(rng, args.limit), args.output)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="rangekit - composable lazy ranges",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rangekit list
  rangekit show fibonacci --limit 10
  rangekit eval '{take: 7, cycle: {over: [3, 4, 5]}}'
  rangekit eval '{zip: [{ref: naturals}, {over: [x, y]}]}' -o json
  rangekit --views my-ranges.yaml show countdown

Configuration:
  Config file: ~/.config/rangekit/config.toml or ./rangekit.toml
  Environment: RANGEKIT_DISPLAY_LIMIT, RANGEKIT_OUTPUT_FORMAT
        """
    )

    parser.add_argument("--config", help="Config file path")
    parser.add_argument("--views", help="YAML file with named range definitions")
    parser.add_argument("-o", "--output", choices=["table", "json", "plain"],
                        help="Output format")
    parser.add_argument("-n", "--limit", type=int, help="Maximum elements shown per range")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Commands")

    list_parser = subparsers.add_parser("list", help="List named ranges")
    list_parser.set_defaults(func=cmd_list)

    show_parser = subparsers.add_parser("show", help="Show a named range")
    show_parser.add_argument("name", help="Range name")
    show_parser.set_defaults(func=cmd_show)

    eval_parser = subparsers.add_parser("eval", help="Evaluate a YAML range definition")
    eval_parser.add_argument("definition", help="Definition, e.g. '{range: [0, 10, 2]}'")
    eval_parser.set_defaults(func=cmd_eval)

    args = parser.parse_args(argv)

    if args.config:
        get_config(reload=True, config_file=Path(args.config))

    config = init_config(output_format=args.output, display_limit=args.limit)
    logging.basicConfig(level=getattr(logging, str(config.log_level).upper(), logging.WARNING))

    args.output = config.output_format
    args.limit = config.display_limit
    if args.limit < 0:
        console.print("[red]Error: --limit must not be negative[/red]")
        sys.exit(1)

    try:
        args.func(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
