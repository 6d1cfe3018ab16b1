"""``frock classes`` — list registered classes.

Resolves an import string to a Frock dispatcher and prints every
registered class name with the factory behind it.
"""

import argparse
import sys

from frock.cli._resolve import resolve_frock


def run_classes(args: argparse.Namespace) -> None:
    try:
        frock = resolve_frock(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    registry = frock.registry
    if not registry:
        print("No classes registered.")
        return

    rows: list[tuple[str, str]] = []
    for name in registry.names():
        factory = registry.get(name)
        module = getattr(factory, "__module__", "")
        qualname = getattr(factory, "__qualname__", repr(factory))
        rows.append((name, f"{module}.{qualname}" if module else qualname))

    width = max(max(len(r[0]) for r in rows), 5)  # "CLASS" header
    fmt = f"{{:<{width}}}  {{}}"
    print(fmt.format("CLASS", "FACTORY"))
    print("-" * min(width + 2 + max(len(r[1]) for r in rows), 80))
    for name, factory_name in rows:
        print(fmt.format(name, factory_name))
