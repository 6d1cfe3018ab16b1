"""Dispatcher import resolution — ``"module:attribute"`` strings to Frock instances.

Shared utility used by every ``frock`` subcommand to locate a dispatcher
from a user-supplied import string.
"""

import importlib

from frock.dispatcher import Frock


def resolve_frock(import_string: str) -> Frock:
    """Resolve an import string to a Frock instance.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"frock"`` (e.g. ``"myapp"`` resolves to
    ``myapp.frock``).

    Supports factory functions: if the resolved object is callable and not
    a Frock instance, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``Frock`` or a factory
            returning one.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "frock"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Frock):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Frock):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a frock.Frock instance"
        raise TypeError(msg)

    return obj
