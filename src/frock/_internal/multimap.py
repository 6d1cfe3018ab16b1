"""MultiValueMapping protocol — request mappings where a key can repeat.

Query strings and form bodies map one key to several values. The
dispatcher accepts these alongside plain mappings; only the first value
of the path key is used.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    Defined with explicit dunder methods because Protocols cannot inherit
    from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: Any) -> Any: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[Any]: ...
    def __len__(self) -> int: ...
    def get(self, key: Any, default: Any = None) -> Any: ...
    def get_list(self, key: Any) -> list[Any]: ...


def is_request_mapping(obj: object) -> bool:
    """True if *obj* can serve as a request: a ``Mapping`` or ``MultiValueMapping``."""
    return isinstance(obj, (Mapping, MultiValueMapping))
