"""
Result Type Implementation.

Ok/Err values for batch operations where one bad item must not hide the
outcome of the others (e.g. converting a list of URIs from the CLI).
Single-value codec calls raise instead.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful conversion."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed conversion, carrying the exception that caused it."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err[E]]


def capture(func: Callable[[U], T], value: U, *errors: type) -> "Result[T, Exception]":
    """
    Call ``func(value)`` and wrap the outcome.

    Only the exception types listed in ``errors`` are turned into Err;
    anything else propagates.
    """
    try:
        return Ok(func(value))
    except errors as e:
        return Err(e)

