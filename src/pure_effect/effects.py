import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Literal

from ._describe import operation_name


@dataclass(frozen=True)
class Success[T]:
    """Terminal effect: the computation finished with ``value``."""

    value: T

    @property
    def tag(self) -> Literal["Success"]:
        return "Success"


@dataclass(frozen=True)
class Failure[E]:
    """Terminal effect: the computation stopped with ``error``. Later steps never run."""

    error: E

    @property
    def tag(self) -> Literal["Failure"]:
        return "Failure"


@dataclass(frozen=True)
class Command[R]:
    """A side effect that has not run yet.

    Args:
        operation: Zero-argument callable performing the side effect. It may return
                   a plain value or an awaitable resolving to one.
        continuation: Receives the operation's result and returns the next effect.
        name: Label used to identify the operation without running it. Defaults to
              the name of ``operation``. Not part of equality.
    """

    operation: Callable[[], R | Awaitable[R]]
    continuation: Callable[[R], "Effect"]
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.name is None:
            object.__setattr__(self, "name", operation_name(self.operation))

    def __repr__(self) -> str:
        return f"Command(name={self.name!r})"

    @property
    def tag(self) -> Literal["Command"]:
        return "Command"


type Effect = Success[Any] | Failure[Any] | Command[Any]


class UnknownEffectError(TypeError):
    """Exception raised when a value that is not an effect reaches the algebra."""

    __match_args__ = ("effect",)

    def __init__(self, effect: Any):
        """Initialize the exception with the offending value."""
        super().__init__(f"Not an effect: {effect!r}")
        self.effect = effect


def chain(effect: Effect, fn: Callable[[Any], Effect]) -> Effect:
    """Sequence ``effect`` with ``fn``.

    - ``Success(value)`` becomes ``fn(value)``.
    - ``Failure`` is returned unchanged and ``fn`` is never called.
    - ``Command(op, cont)`` becomes a new command with the same operation whose
      continuation chains ``cont(result)`` with ``fn``. Nothing runs here.

    Raises:
        UnknownEffectError: If ``effect`` is not an effect.
    """
    match effect:
        case Success(value):
            return fn(value)
        case Failure():
            return effect
        case Command(operation, continuation, name):

            def _next(result: Any) -> Effect:
                return chain(continuation(result), fn)

            return Command(operation, _next, name=name)
        case _:
            raise UnknownEffectError(effect)


def effect_pipe(*steps: Callable[[Any], Effect]) -> Callable[[Any], Effect]:
    """Compose effect-returning steps into a single function of a start value.

    Each step receives the unwrapped value of the previous ``Success``. The first
    ``Failure`` short-circuits: later steps are never called.

    Each step chained after a command nests one more call inside that command's
    continuation, so a single pipe holding more command steps than the
    recursion limit ends in ``Failure(RecursionError)``. Split very long flows
    into commands whose continuations return the next command instead.

    Example:
        >>> flow = effect_pipe(validate, lambda _: find_user(email), ensure_available)
        >>> flow(data)
        Command(name='cmd_find_user')
    """

    def _run(start: Any) -> Effect:
        return reduce(chain, steps, Success(start))

    return _run


async def run_effect(effect: Effect) -> Success[Any] | Failure[Any]:
    """Drive ``effect`` to a terminal outcome, running each command in turn.

    Operations run one at a time. Awaitable results are awaited before being
    passed to the continuation. An exception raised by an operation, by awaiting
    its result, or by the continuation ends the run with ``Failure(exception)``.

    Raises:
        UnknownEffectError: If a value that is not an effect is reached.
    """
    while True:
        match effect:
            case Success() | Failure():
                return effect
            case Command(operation, continuation):
                try:
                    result = operation()
                    if inspect.isawaitable(result):
                        result = await result
                    effect = continuation(result)
                except UnknownEffectError:
                    raise
                except Exception as error:
                    return Failure(error)
            case _:
                raise UnknownEffectError(effect)


def run_effect_sync(effect: Effect) -> Success[Any] | Failure[Any]:
    """Blocking counterpart of :func:`run_effect` for synchronous operations.

    An operation that returns an awaitable ends the run with ``Failure(TypeError)``;
    use :func:`run_effect` for those.

    Raises:
        UnknownEffectError: If a value that is not an effect is reached.
    """
    while True:
        match effect:
            case Success() | Failure():
                return effect
            case Command(operation, continuation, name):
                try:
                    result = operation()
                    if inspect.isawaitable(result):
                        if inspect.iscoroutine(result):
                            result.close()
                        raise TypeError(
                            f"Command {name} returned an awaitable; use run_effect instead."
                        )
                    effect = continuation(result)
                except UnknownEffectError:
                    raise
                except Exception as error:
                    return Failure(error)
            case _:
                raise UnknownEffectError(effect)


def is_outcome(effect: Effect) -> bool:
    """Tell whether ``effect`` is terminal (Success or Failure)."""
    return isinstance(effect, (Success, Failure))
