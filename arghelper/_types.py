from typing import Any, Callable, Optional

from typing_extensions import Protocol


class Kind(Protocol):
    """
    Anything that turns a token into a value, and a bare call into a zero.

    ``int``, ``float``, `decimal.Decimal` and `.unsigned` all qualify.
    """
    def __call__(self, value: str = ...) -> Any:
        ...


#: Caller-supplied destination; invoked with each newly bound value.
Setter = Optional[Callable[[Any], None]]
