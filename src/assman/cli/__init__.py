"""Assman CLI — inspect a dispatcher's controllers and routing decisions.

Entry point registered as ``assman`` in ``pyproject.toml``::

    [project.scripts]
    assman = "assman.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``assman`` command."""
    parser = argparse.ArgumentParser(
        prog="assman",
        description="Assman — manager request dispatch.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- assman controllers -----------------------------------------------
    controllers_parser = subparsers.add_parser(
        "controllers", help="List registered controllers"
    )
    controllers_parser.add_argument(
        "app",
        help="Import string for a Dispatcher (e.g. myapp:dispatcher)",
    )

    # -- assman route -----------------------------------------------------
    route_parser = subparsers.add_parser(
        "route", help="Show how a request would be dispatched"
    )
    route_parser.add_argument(
        "app",
        help="Import string for a Dispatcher (e.g. myapp:dispatcher)",
    )
    route_parser.add_argument("--class", dest="class_", default=None, help="class field")
    route_parser.add_argument("--method", default=None, help="method field")
    route_parser.add_argument(
        "--field",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Body field (repeatable)",
    )
    route_parser.add_argument(
        "--files",
        action="store_true",
        help="Pretend the request carries an uploaded file",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "controllers":
        from assman.cli._controllers import run_controllers

        run_controllers(args)
    elif args.command == "route":
        from assman.cli._route import run_route

        run_route(args)
