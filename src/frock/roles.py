"""Class roles — which namespace prefix a derived class name lives under."""

from enum import StrEnum


class Role(StrEnum):
    CONTROLLER = "controller"
    MODEL = "model"
    VIEW = "view"


def parse_role(value: object) -> Role | None:
    """Return the ``Role`` for *value*, or ``None`` if it is not a known tag.

    Accepts a ``Role`` member or its plain string value::

        parse_role("view")      -> Role.VIEW
        parse_role("service")   -> None
    """
    if isinstance(value, Role):
        return value
    if isinstance(value, str):
        try:
            return Role(value)
        except ValueError:
            return None
    return None
