from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Variante exitosa del Result Monad.

    The store reader returns Result so that each caller decides, explicitly,
    what a failed load means:

        data = read_store(path).unwrap()        # raise the error
        data = read_store(path).unwrap_or({})   # fall back to an empty store
    """

    value: T

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Variante de error: contiene el error y ningún valor."""

    error: E

    def unwrap(self) -> T:
        # Exception payloads are raised as-is, anything else as ValueError.
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap() on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]
