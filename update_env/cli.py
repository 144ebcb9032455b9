"""update-env command line: set, get, list and delete variables in a .env file."""

import argparse
import logging
import sys
from pathlib import Path

from update_env import __version__
from update_env.config import get_settings
from update_env.services.env_file import delete_var, get_var, list_vars, set_var

logger = logging.getLogger(__name__)

PROG = "update-env"
DESCRIPTION = "CLI utility for managing environment variables"


def _cmd_set(path: Path, args) -> None:
    set_var(path, args.key, args.value)
    print(f"Updated {args.key}={args.value}")


def _cmd_get(path: Path, args) -> None:
    value = get_var(path, args.key)
    if value is None:
        print(f"Variable {args.key} not found")
    else:
        print(f"{args.key}={value}")


def _cmd_list(path: Path, args) -> None:
    entries = list_vars(path)
    if not entries:
        print("No environment variables found.")
        return
    print("Environment variables:")
    for entry in entries:
        print(entry)


def _cmd_delete(path: Path, args) -> None:
    if delete_var(path, args.key):
        print(f"Deleted {args.key}")
    else:
        print(f"Variable {args.key} not found")


def build_parser(default_file: str = ".env") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug output to stderr")

    # Shared by every subcommand so -f can follow the command name
    file_opt = argparse.ArgumentParser(add_help=False)
    file_opt.add_argument("-f", "--file", default=default_file,
                          help=f"Environment file path (default: {default_file})")

    sub = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    p = sub.add_parser("set", parents=[file_opt], help="Set an environment variable")
    p.add_argument("key", help="Variable name")
    p.add_argument("value", help="Variable value")
    p.set_defaults(func=_cmd_set)

    p = sub.add_parser("get", parents=[file_opt], help="Get an environment variable")
    p.add_argument("key", help="Variable name")
    p.set_defaults(func=_cmd_get)

    p = sub.add_parser("list", parents=[file_opt], help="List all environment variables")
    p.set_defaults(func=_cmd_list)

    p = sub.add_parser("delete", parents=[file_opt], help="Delete an environment variable")
    p.add_argument("key", help="Variable name")
    p.set_defaults(func=_cmd_delete)

    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings.default_file).parse_args(argv)

    logging.basicConfig(
        level="DEBUG" if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    path = Path(args.file).resolve()
    try:
        args.func(path, args)
    except (OSError, UnicodeError) as e:
        logger.debug("%s failed on %s", args.command, path, exc_info=True)
        detail = str(e) or type(e).__name__
        print(f"Error: {detail}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
