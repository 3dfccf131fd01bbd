import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - type check only
    from .effects import Effect


def operation_name(operation: Callable[[], Any]) -> str:
    """Derive a stable label for a deferred operation.

    Closures defined inside a function have a dotted ``__qualname__`` such as
    ``find_user.<locals>.cmd_find_user``; only the last component is kept so the
    label reads the same as the ``def`` that created it.
    """
    target: Any = operation
    while isinstance(target, functools.partial):
        target = target.func

    qualname = getattr(target, "__qualname__", None) or getattr(target, "__name__", None)
    if isinstance(qualname, str) and qualname:
        return qualname.rsplit(".", 1)[-1]
    return repr(operation)


def describe_effect(effect: "Effect") -> str:
    """Return a short, human readable description of an effect.

    Example:
        >>> describe_effect(Success(3))
        'Success(3)'
        >>> describe_effect(Command(cmd_find_user, Success))
        'Command(cmd_find_user)'
    """
    # Imported here to avoid a circular dependency with effects.py
    from .effects import Command, Failure, Success, UnknownEffectError

    match effect:
        case Success(value):
            return f"Success({value!r})"
        case Failure(error):
            return f"Failure({error!r})"
        case Command(name=name):
            return f"Command({name})"
        case _:
            raise UnknownEffectError(effect)

