"""Frock — a front-controller dispatcher.

Reads a path out of a request mapping, derives a class name from it for a
controller, model, or view role, constructs the registered class, and runs
its ``execute`` method.

Basic usage::

    from frock import Frock, FrockConfig

    frock = Frock(
        request,
        config=FrockConfig(namespaces={"controller": "App\\\\controller"}),
    )

    @frock.register("controller")
    class Hello:
        def execute(self):
            print("Hello, World!")

    frock.execute_path("controller")
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ClassNotFound",
    "ClassRegistry",
    "ConfigurationError",
    "DebugLog",
    "Frock",
    "FrockConfig",
    "FrockError",
    "MissingEntryPoint",
    "Role",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import frock`` fast while providing a clean top-level API.
    """
    if name == "Frock":
        from frock.dispatcher import Frock

        return Frock

    if name == "FrockConfig":
        from frock.config import FrockConfig

        return FrockConfig

    if name == "ClassRegistry":
        from frock.registry import ClassRegistry

        return ClassRegistry

    if name == "DebugLog":
        from frock.debug import DebugLog

        return DebugLog

    if name == "Role":
        from frock.roles import Role

        return Role

    if name in ("ClassNotFound", "ConfigurationError", "FrockError", "MissingEntryPoint"):
        from frock import errors

        return getattr(errors, name)

    msg = f"module 'frock' has no attribute {name!r}"
    raise AttributeError(msg)
