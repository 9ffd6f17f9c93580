import argparse
import logging
import sys
from pathlib import Path

from stylekit.app_shell.context import StyleContext
from stylekit.domain.errors import ConfigurationError
from stylekit.rules.loader import default_rules_path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_context(rules_path: Path | None) -> StyleContext:
    if rules_path is not None:
        return StyleContext.from_file(rules_path)

    path = default_rules_path()
    if not path.exists():
        logger.info(f"No rules file at {path}, using default breakpoints.")
        return StyleContext.create()
    return StyleContext.from_file(path)


def handle_check(ctx: StyleContext, args: argparse.Namespace) -> None:
    print(f"Rules valid: {len(ctx.table)} breakpoints.")


def handle_breakpoints(ctx: StyleContext, args: argparse.Namespace) -> None:
    for name in ctx.table.names():
        print(f"{name:<12} {ctx.table[name]}")


def handle_resolve(ctx: StyleContext, args: argparse.Namespace) -> None:
    print(ctx.resolve(args.name))


def handle_media(ctx: StyleContext, args: argparse.Namespace) -> None:
    if args.kind == "min":
        media = ctx.min_width(args.breakpoint)
    elif args.kind == "max":
        media = ctx.max_width(args.breakpoint)
    else:
        media = ctx.between_widths(args.breakpoint, args.upper)
    print(f"@media {media.condition}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stylekit", description="stylekit CLI")
    parser.add_argument(
        "--rules", type=Path, help="Path to the rules file (default: stylekit_rules.yaml)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check
    subparsers.add_parser("check", help="Validate the rules file")

    # breakpoints
    subparsers.add_parser("breakpoints", help="List breakpoints in ascending order")

    # resolve
    resolve_parser = subparsers.add_parser("resolve", help="Print the size of a breakpoint")
    resolve_parser.add_argument("name", help="Breakpoint name")

    # media
    media_parser = subparsers.add_parser("media", help="Print a width media query")
    media_parser.add_argument("kind", choices=["min", "max", "between"])
    media_parser.add_argument("breakpoint", help="Breakpoint name")
    media_parser.add_argument("upper", nargs="?", help="Upper breakpoint name (between only)")

    return parser


HANDLERS = {
    "check": handle_check,
    "breakpoints": handle_breakpoints,
    "resolve": handle_resolve,
    "media": handle_media,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "media" and args.kind == "between" and args.upper is None:
        parser.error("media between requires an upper breakpoint")
    if args.command == "media" and args.kind != "between" and args.upper is not None:
        parser.error(f"media {args.kind} takes a single breakpoint")

    try:
        ctx = get_context(args.rules)
        HANDLERS[args.command](ctx, args)
    except (ConfigurationError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
