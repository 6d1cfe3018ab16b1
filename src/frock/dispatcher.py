"""Front-controller dispatcher.

Frock turns a request's path value into a class name, constructs that
class from the registry, and runs its ``execute`` method::

    from frock import Frock, FrockConfig

    frock = Frock(
        {"path": "user/list"},
        config=FrockConfig(namespaces={"controller": "App\\\\controller"}),
    )

    @frock.register("controller", "user/list")
    class UserList:
        def execute(self) -> None:
            ...

    frock.get_class_name("controller")   # "App\\\\controller\\\\user\\\\List"
    frock.execute_path("controller")     # UserList().execute()

The request is always passed in explicitly. Nothing is read from
process-wide state.

Each public method records exactly one entry in ``debug_log`` when the
config enables debugging. Methods that build on each other go through
private helpers so a single call never records twice. The
``registry`` and ``debug_log`` properties are plain attribute access and
are not traced.
"""

from collections.abc import Callable
from typing import Any

from frock._internal.invoke import invoke
from frock._internal.multimap import is_request_mapping
from frock.config import FrockConfig
from frock.debug import DebugLog
from frock.errors import ClassNotFound, ConfigurationError, MissingEntryPoint
from frock.naming import class_name_for
from frock.registry import ClassRegistry
from frock.roles import Role, parse_role


class Frock:
    """Resolve request paths to registered classes and run them.

    Args:
        request: The request mapping to take the path from. ``None`` means
            no request; the stored path stays unset and lookups fall back
            to ``default_path``.
        config: Initial configuration. Defaults to ``FrockConfig()``.
        registry: Classes available for instantiation. Defaults to a new,
            empty ``ClassRegistry``.
    """

    __slots__ = (
        "_debug_log",
        "_namespaces",
        "_path",
        "_path_key",
        "_registry",
        "_separator",
        "default_path",
    )

    def __init__(
        self,
        request: Any = None,
        *,
        config: FrockConfig | None = None,
        registry: ClassRegistry | None = None,
    ) -> None:
        config = config if config is not None else FrockConfig()
        self._path_key: str | int = config.path_key
        self._path: Any = None
        self._namespaces: dict[Role, str] = dict(config.namespaces)
        self._separator = config.namespace_separator
        self._registry = registry if registry is not None else ClassRegistry()
        self._debug_log = DebugLog(config.debug)
        self.default_path: str = config.default_path

        self._debug_log.record("__init__", request)
        self._extract_path(request)

    # -- Request ----------------------------------------------------------

    def process_request(self, request: Any) -> bool:
        """Take the path value out of *request*.

        Returns True if a path was found. A non-mapping request, a missing
        key, or a ``None`` value all leave the stored path unset and
        return False.
        """
        self._debug_log.record("process_request", request)
        return self._extract_path(request)

    def _extract_path(self, request: Any) -> bool:
        self._path = None
        if is_request_mapping(request) and self._path_key in request:
            self._path = request[self._path_key]
        return self._path is not None

    def get_path(self) -> Any:
        self._debug_log.record("get_path")
        return self._path

    def get_path_key(self) -> str | int:
        self._debug_log.record("get_path_key")
        return self._path_key

    def set_path_key(self, key: object) -> bool:
        """Change the request key the path is read from.

        Only ``str`` and ``int`` keys are accepted (``bool`` is not). Anything
        else returns False and keeps the current key.
        """
        self._debug_log.record("set_path_key", key)
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            return False
        self._path_key = key
        return True

    # -- Namespaces -------------------------------------------------------

    def get_class_namespace(self, role: Role | str) -> str | None:
        self._debug_log.record("get_class_namespace", role)
        parsed = parse_role(role)
        if parsed is None:
            return None
        return self._namespaces[parsed]

    def set_class_namespace(self, role: Role | str, namespace: object) -> bool:
        """Set the namespace prefix for *role*.

        Returns False and changes nothing if *role* is not one of the known
        roles or *namespace* is not a string.
        """
        self._debug_log.record("set_class_namespace", role, namespace)
        parsed = parse_role(role)
        if parsed is None or not isinstance(namespace, str):
            return False
        self._namespaces[parsed] = namespace
        return True

    # -- Class names ------------------------------------------------------

    def get_class_name(self, role: Role | str, path: Any = None) -> str | None:
        """Derive the class name for *role* and *path*.

        *path* defaults to the stored request path, then to
        ``default_path``. Slashes become namespace separators, the role's
        prefix is prepended, and the last segment is capitalized. Returns
        ``None`` for an unknown role.
        """
        self._debug_log.record("get_class_name", role, path)
        return self._class_name(role, path)

    def _class_name(self, role: Role | str, path: Any) -> str | None:
        parsed = parse_role(role)
        if parsed is None:
            return None
        return self._derive(parsed, path)

    def _derive(self, role: Role, path: Any) -> str:
        if path is None:
            path = self._path if self._path is not None else self.default_path
        return class_name_for(self._namespaces[role], str(path), self._separator)

    # -- Instantiation ----------------------------------------------------

    def instantiate_class(self, role: Role | str, path: Any = None) -> Any:
        """Construct the class derived for *role* and *path*.

        Raises ``ClassNotFound`` if no class is registered under that name.
        """
        self._debug_log.record("instantiate_class", role, path)
        return self._instantiate(role, path)[1]

    def _instantiate(self, role: Role | str, path: Any) -> tuple[str, Any]:
        class_name = self._class_name(role, path)
        if class_name is None:
            raise ClassNotFound("", reason=f"unknown role {role!r}")
        return class_name, self._registry.create(class_name)

    def execute_path(self, role: Role | str, path: Any = None) -> None:
        """Construct the class for *role* and *path* and call its ``execute()``."""
        self._debug_log.record("execute_path", role, path)
        class_name, instance = self._instantiate(role, path)
        _entry_point(class_name, instance)()

    async def aexecute_path(self, role: Role | str, path: Any = None) -> None:
        """Like ``execute_path``, awaiting ``execute()`` if it is async."""
        self._debug_log.record("aexecute_path", role, path)
        class_name, instance = self._instantiate(role, path)
        await invoke(_entry_point(class_name, instance))

    # -- Registration -----------------------------------------------------

    def register(
        self, role: Role | str, path: str | None = None
    ) -> Callable[[type], type]:
        """Decorator registering a class under the name derived for *role*.

        With no *path*, the class's own name is used as the path::

            @frock.register("view")
            class Hello: ...          # registered as "<view prefix>\\\\Hello"

        The name is computed from the namespace prefix in effect when the
        decorator runs.
        """
        self._debug_log.record("register", role, path)
        parsed = parse_role(role)
        if parsed is None:
            msg = f"Unknown role {role!r}"
            raise ConfigurationError(msg)

        def decorator(cls: type) -> type:
            class_name = self._derive(parsed, path if path is not None else cls.__name__)
            self._registry.register(class_name, cls)
            return cls

        return decorator

    # Plain attribute access, not traced in debug_log.

    @property
    def registry(self) -> ClassRegistry:
        return self._registry

    @property
    def debug_log(self) -> DebugLog:
        return self._debug_log

    def __repr__(self) -> str:
        return f"<Frock path={self._path!r} path_key={self._path_key!r}>"


def _entry_point(class_name: str, instance: Any) -> Callable[[], Any]:
    execute = getattr(instance, "execute", None)
    if not callable(execute):
        raise MissingEntryPoint(class_name)
    return execute
