"""Debug log — append-only trace of dispatcher calls.

When enabled, every public dispatcher operation records one line of the
form ``operation(arg, ...)`` with arguments shown by ``repr``. Lines are
also emitted on the ``frock.dispatch`` logger at DEBUG level so they show
up wherever the host application routes its logs.

A disabled log is a no-op: nothing is formatted, nothing is stored.
"""

import logging
from collections.abc import Iterator

logger = logging.getLogger("frock.dispatch")


def format_call(operation: str, *args: object) -> str:
    """Format a call as ``operation(arg_repr, ...)``."""
    return f"{operation}({', '.join(repr(arg) for arg in args)})"


class DebugLog:
    """Ordered, append-only sequence of trace lines."""

    __slots__ = ("_enabled", "_entries")

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled
        self._entries: list[str] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def record(self, operation: str, *args: object) -> None:
        if not self._enabled:
            return
        line = format_call(operation, *args)
        self._entries.append(line)
        logger.debug("%s", line)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __repr__(self) -> str:
        state = "enabled" if self._enabled else "disabled"
        return f"<DebugLog {state}, {len(self._entries)} entries>"
