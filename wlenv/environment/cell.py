"""Shared state cell with a runtime-checked access discipline"""

from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from wlenv.core.errors import BorrowError

T = TypeVar("T")


class SharedCell(Generic[T]):
    """
    Holder for state shared between environment handles and the dispatcher.

    Any number of shared windows may be open at once, or exactly one
    exclusive window. A conflicting request raises BorrowError immediately;
    nothing here ever waits.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._readers = 0
        self._exclusive = False

    @contextmanager
    def borrow(self) -> Iterator[T]:
        if self._exclusive:
            raise BorrowError("Environment state is already borrowed exclusively")
        self._readers += 1
        try:
            yield self._value
        finally:
            self._readers -= 1

    @contextmanager
    def borrow_mut(self) -> Iterator[T]:
        if self._exclusive:
            raise BorrowError("Environment state is already borrowed exclusively")
        if self._readers:
            raise BorrowError(
                f"Environment state is already borrowed ({self._readers} shared windows open)"
            )
        self._exclusive = True
        try:
            yield self._value
        finally:
            self._exclusive = False

    @property
    def is_borrowed(self) -> bool:
        return self._exclusive or self._readers > 0
