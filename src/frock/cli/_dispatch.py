"""``frock resolve`` and ``frock run`` — derive or execute the class for a path."""

import argparse
import functools
import logging
import sys

import anyio

from frock.cli._resolve import resolve_frock
from frock.dispatcher import Frock
from frock.errors import FrockError

logger = logging.getLogger("frock.cli")


def _load(import_string: str) -> Frock:
    try:
        return resolve_frock(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_resolve(args: argparse.Namespace) -> None:
    """Print the class name *args.path* resolves to for *args.role*."""
    frock = _load(args.app)
    class_name = frock.get_class_name(args.role, args.path)
    if class_name is None:
        print(f"Error: unknown role {args.role!r}", file=sys.stderr)
        raise SystemExit(1)
    print(class_name)
    if class_name not in frock.registry:
        print(f"Warning: {class_name} is not registered", file=sys.stderr)


def run_execute(args: argparse.Namespace) -> None:
    """Instantiate and execute the class for *args.path*.

    Entry points may be sync or async; both run to completion under
    ``anyio.run``. Dispatch errors exit with status 1.
    """
    frock = _load(args.app)
    logger.debug("Executing %s path %r", args.role, args.path)
    try:
        anyio.run(functools.partial(frock.aexecute_path, args.role, args.path))
    except FrockError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
