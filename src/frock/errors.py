"""Frock exception hierarchy.

Shared across the dispatcher, registry, and CLI so every module
raises and catches the same types.
"""


class FrockError(Exception):
    """Base for all frock-specific errors."""


class ConfigurationError(FrockError):
    """Raised when dispatcher configuration is invalid.

    Typically raised by ``FrockConfig`` at construction time or by the
    registry when two factories claim the same class name.
    """


class ClassNotFound(FrockError, LookupError):  # noqa: N818 — mirrors the lookup it reports
    """No class is registered under the derived class name.

    ``reason`` is set when no name could be derived at all, e.g. for an
    unknown role.
    """

    def __init__(self, class_name: str, reason: str = "") -> None:
        self.class_name = class_name
        self.reason = reason
        if reason:
            super().__init__(f"Class not found: {class_name or '?'} ({reason})")
        else:
            super().__init__(f"Class not found: {class_name}")


class MissingEntryPoint(FrockError, TypeError):  # noqa: N818
    """The resolved instance has no callable ``execute`` method."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(f"{class_name} has no callable 'execute' method")
