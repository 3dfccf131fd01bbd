"""A minimal effect algebra for a functional core and an imperative shell.

Business logic returns a description of the work to do instead of doing it:
``Success`` and ``Failure`` are final outcomes, while ``Command`` pairs a
zero-argument side effect with a continuation for its result. Steps are
composed with ``effect_pipe`` and only ``run_effect`` ever performs I/O, so
branching logic can be tested as plain data.

Example:

>>> import pure_effect as pe
>>>
>>> users: dict[str, dict] = {}
>>>
>>> def validate(data: dict) -> pe.Effect:
...     if "@" not in data["email"]:
...         return pe.Failure("Invalid email format.")
...     return pe.Success(data)
>>>
>>> def save(data: dict) -> pe.Effect:
...     def cmd_save_user():
...         users[data["email"]] = data
...         return data
...     return pe.Command(cmd_save_user, pe.Success)
>>>
>>> register = pe.effect_pipe(validate, save)
>>> register({"email": "bad-email"})
Failure(error='Invalid email format.')
>>> register({"email": "a@b.c"})
Command(name='cmd_save_user')
>>> pe.run_effect_sync(register({"email": "a@b.c"}))
Success(value={'email': 'a@b.c'})
"""

from ._describe import describe_effect
from .__version__ import __version__
from .effects import (
    Command,
    Effect,
    Failure,
    Success,
    UnknownEffectError,
    chain,
    effect_pipe,
    is_outcome,
    run_effect,
    run_effect_sync,
)
from .util import feed, walk

__all__ = [
    "Command",
    "Effect",
    "Failure",
    "Success",
    "UnknownEffectError",
    "__version__",
    "chain",
    "describe_effect",
    "effect_pipe",
    "feed",
    "is_outcome",
    "run_effect",
    "run_effect_sync",
    "walk",
]
