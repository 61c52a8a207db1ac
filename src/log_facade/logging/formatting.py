"""Message construction for plain and templated log calls."""

from collections.abc import Mapping
from typing import Any


def concat(args: tuple[Any, ...]) -> str:
    """Join the string form of every argument, without a separator."""
    return "".join(str(arg) for arg in args)


def sprintf(template: str, args: tuple[Any, ...]) -> str:
    """Render a printf-style ``template``.

    A single non-empty mapping feeds ``%(name)s`` placeholders, and ``%%``
    collapses to ``%`` even without arguments. A template that does not fit
    its arguments is not an error: the arguments are appended to it, or with
    no arguments the template is kept verbatim.
    """
    if not args:
        try:
            return str(template) % ()
        except (TypeError, ValueError):
            return str(template)
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return str(template) % values
    except (TypeError, ValueError, KeyError):
        return f"{template} {args!r}"


def format_message(template: str | None, args: tuple[Any, ...]) -> str:
    """Build the message of a log call; ``template=None`` means concatenation."""
    if template is None:
        return concat(args)
    return sprintf(template, args)
