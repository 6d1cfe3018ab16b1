"""Class-name derivation from request paths.

Pure string transforms. The dispatcher composes them, but none of them
know about requests, roles, or the registry, so the naming policy can be
replaced without touching lookup logic.

Examples::

    path_to_namespace("user/list")                  -> "user\\list"
    capitalize_last_segment("App\\user\\list")      -> "App\\user\\List"
    class_name_for("App\\controller", "user/list")  -> "App\\controller\\user\\List"
"""

NAMESPACE_SEPARATOR = "\\"
PATH_SEPARATOR = "/"


def path_to_namespace(path: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Replace every path separator in *path* with *separator*."""
    return path.replace(PATH_SEPARATOR, separator)


def capitalize_last_segment(name: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Upper-case the first character after the final *separator*.

    Earlier segments are left alone. With no separator the first
    character of *name* is upper-cased. A trailing separator leaves
    *name* unchanged.
    """
    index = name.rfind(separator)
    start = 0 if index == -1 else index + len(separator)
    if start >= len(name):
        return name
    return name[:start] + name[start].upper() + name[start + 1 :]


def join_namespace(*parts: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Join the non-empty *parts* with *separator*."""
    return separator.join(part for part in parts if part)


def class_name_for(prefix: str, path: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Derive the fully-qualified class name for *path* under *prefix*.

    An empty *prefix* is skipped. The path is always appended, so an empty
    path leaves a trailing separator rather than naming the prefix itself.
    """
    name = path_to_namespace(path, separator)
    if prefix:
        name = prefix + separator + name
    return capitalize_last_segment(name, separator)
