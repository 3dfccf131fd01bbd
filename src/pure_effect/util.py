from typing import Any

from .effects import Command, Effect, Failure, Success, UnknownEffectError


def feed(effect: Effect, result: Any) -> Effect:
    """Apply a command's continuation to ``result`` without running its operation.

    This is how a test steps through a flow by hand: supply what the operation
    would have returned and inspect the effect that comes next.

    Raises:
        TypeError: If ``effect`` is an outcome, which has no continuation.
    """
    match effect:
        case Command(continuation=continuation):
            return continuation(result)
        case Success() | Failure():
            raise TypeError(f"Cannot feed a result into a terminal effect: {effect!r}")
        case _:
            raise UnknownEffectError(effect)


def walk(effect: Effect, *results: Any) -> Effect:
    """Feed ``results`` one after another, returning the effect reached at the end.

    Args:
        effect: The effect to start from.
        *results: Stand-ins for the results of successive commands.
    """
    for result in results:
        effect = feed(effect, result)
    return effect
