"""Frock CLI — resolve, run, and list dispatcher classes.

Entry point registered as ``frock`` in ``pyproject.toml``::

    [project.scripts]
    frock = "frock.cli:main"
"""

import argparse
import sys

from frock.roles import Role


def _add_dispatch_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "app",
        help="Import string (e.g. myapp:frock)",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Request path (defaults to the dispatcher's stored or default path)",
    )
    parser.add_argument(
        "--role",
        choices=[role.value for role in Role],
        default=Role.CONTROLLER.value,
        help="Class role (default: controller)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``frock`` command."""
    parser = argparse.ArgumentParser(
        prog="frock",
        description="Frock — a front-controller dispatcher.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- frock resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Print the class name for a path")
    _add_dispatch_arguments(resolve_parser)

    # -- frock run --------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Instantiate and execute the class for a path")
    _add_dispatch_arguments(run_parser)

    # -- frock classes ----------------------------------------------------
    classes_parser = subparsers.add_parser("classes", help="List registered classes")
    classes_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:frock)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from frock.cli._dispatch import run_resolve

        run_resolve(args)
    elif args.command == "run":
        from frock.cli._dispatch import run_execute

        run_execute(args)
    elif args.command == "classes":
        from frock.cli._classes import run_classes

        run_classes(args)
