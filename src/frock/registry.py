"""Class registry — the closed table of instantiable classes.

The dispatcher never imports or evaluates a name it derives from a
request. It only constructs what was registered here at startup, keyed by
the fully-qualified class name the naming rules produce::

    registry = ClassRegistry()

    @registry.register("App\\\\controller\\\\Hello")
    class Hello:
        def execute(self) -> None: ...

    registry.create("App\\\\controller\\\\Hello")   # -> Hello()
    registry.create("App\\\\controller\\\\Nope")    # raises ClassNotFound

Mirrors the tool registry of the web framework: a name -> definition table
with ``get``/``__contains__``/``__len__`` lookups and duplicate detection.
"""

import inspect
import logging
from collections.abc import Callable, Iterator
from types import ModuleType
from typing import Any, TypeAlias, overload

from frock.errors import ClassNotFound, ConfigurationError
from frock.naming import NAMESPACE_SEPARATOR, capitalize_last_segment, join_namespace

logger = logging.getLogger("frock.registry")

Factory: TypeAlias = Callable[[], Any]


class ClassRegistry:
    """Mapping from class name to zero-argument factory."""

    __slots__ = ("_factories",)

    def __init__(self) -> None:
        self._factories: dict[str, Factory] = {}

    @overload
    def register(self, name: str) -> Callable[[Factory], Factory]: ...

    @overload
    def register(self, name: str, factory: Factory) -> Factory: ...

    def register(
        self, name: str, factory: Factory | None = None
    ) -> Factory | Callable[[Factory], Factory]:
        """Register *factory* under *name*.

        Called with a factory, registers it and returns it. Called with only
        a name, returns a decorator. Registering the same factory twice is a
        no-op; a different factory under an existing name is a
        ``ConfigurationError``.
        """
        if factory is None:

            def decorator(func: Factory) -> Factory:
                return self.register(name, func)

            return decorator

        if not name:
            msg = "Class name must not be empty."
            raise ConfigurationError(msg)
        if not callable(factory):
            msg = f"Factory for {name!r} is not callable: {factory!r}"
            raise ConfigurationError(msg)

        existing = self._factories.get(name)
        if existing is not None and existing is not factory:
            msg = f"Duplicate class name: {name!r} is already registered to {existing!r}"
            raise ConfigurationError(msg)

        self._factories[name] = factory
        logger.debug("Registered %s -> %r", name, factory)
        return factory

    def register_module(
        self,
        module: ModuleType,
        prefix: str = "",
        *,
        separator: str = NAMESPACE_SEPARATOR,
    ) -> list[str]:
        """Register every class defined in *module* under *prefix*.

        Imported classes are skipped, as are names starting with ``_``.
        Each class is registered as ``prefix<sep>ClassName`` with the last
        segment capitalized. Returns the registered names in definition
        order.
        """
        names: list[str] = []
        for attr, obj in vars(module).items():
            if attr.startswith("_") or not inspect.isclass(obj):
                continue
            if obj.__module__ != module.__name__:
                continue
            name = capitalize_last_segment(
                join_namespace(prefix, attr, separator=separator), separator
            )
            self.register(name, obj)
            names.append(name)
        return names

    def get(self, name: str) -> Factory | None:
        """Look up a factory by name. Returns ``None`` if not found."""
        return self._factories.get(name)

    def create(self, name: str) -> Any:
        """Construct a new instance of the class registered as *name*.

        Raises ``ClassNotFound`` if *name* is not registered.
        """
        factory = self._factories.get(name)
        if factory is None:
            raise ClassNotFound(name)
        return factory()

    def names(self) -> list[str]:
        """Return registered class names, sorted."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
