"""Dispatcher configuration.

FrockConfig is a frozen dataclass — immutable after creation, validated
once at construction, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from frock.errors import ConfigurationError
from frock.naming import NAMESPACE_SEPARATOR
from frock.roles import Role, parse_role


def _default_namespaces() -> Mapping[Role, str]:
    return MappingProxyType({role: "" for role in Role})


@dataclass(frozen=True, slots=True)
class FrockConfig:
    """Dispatcher configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FrockConfig(
            debug=True,
            namespaces={"controller": "App\\\\controller", "view": "App\\\\view"},
        )

    ``namespaces`` may name any subset of the roles; missing roles get an
    empty prefix. Keys may be ``Role`` members or their string values.
    """

    # Request
    path_key: str | int = "path"
    default_path: str = "hello"

    # Class names
    namespaces: Mapping[Role, str] = field(default_factory=_default_namespaces)
    namespace_separator: str = NAMESPACE_SEPARATOR

    # Debugging
    debug: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.path_key, bool) or not isinstance(self.path_key, (str, int)):
            msg = f"path_key must be a str or int, got {type(self.path_key).__name__}"
            raise ConfigurationError(msg)
        if not self.namespace_separator:
            msg = "namespace_separator must not be empty"
            raise ConfigurationError(msg)

        if not isinstance(self.namespaces, Mapping):
            msg = f"namespaces must be a mapping, got {type(self.namespaces).__name__}"
            raise ConfigurationError(msg)

        table = {role: "" for role in Role}
        for key, prefix in self.namespaces.items():
            role = parse_role(key)
            if role is None:
                msg = (
                    f"Unknown namespace role {key!r}. "
                    f"Expected one of: {', '.join(r.value for r in Role)}"
                )
                raise ConfigurationError(msg)
            if not isinstance(prefix, str):
                msg = f"Namespace for {role.value!r} must be a str, got {type(prefix).__name__}"
                raise ConfigurationError(msg)
            table[role] = prefix
        # Frozen: bypass __setattr__ to store the normalized table
        object.__setattr__(self, "namespaces", MappingProxyType(table))

    def with_namespaces(self, **prefixes: str) -> "FrockConfig":
        """Return a copy with the given role prefixes replaced::

            config.with_namespaces(controller="App\\\\controller")
        """
        current = {role.value: prefix for role, prefix in self.namespaces.items()}
        return replace(self, namespaces={**current, **prefixes})
