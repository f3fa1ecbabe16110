from __future__ import annotations
from typing import Iterator, TypeVar

from recursive_list import Chain, Empty, RecursiveList, Single
from recursive_list.asserts import MalformedListError
from recursive_list.pop import take

T = TypeVar("T")


class Cursor(Iterator[T]):
    """
    Owns a list and eats it from the front. Once it's handed out an
    item there's no going back for it, and when it's done it holds
    an Empty list forever.
    """

    __slots__ = ("_held",)

    def __init__(self, rlist: RecursiveList[T]):
        # Moved in, so the caller's list is left Empty
        self._held = take(rlist)

    @property
    def remaining(self) -> RecursiveList[T]:
        return self._held

    def advance(self) -> T | None:
        return next(self, None)

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        match self._held.shape:
            case Empty():
                raise StopIteration
            case Single(item):
                self._held = RecursiveList()
                return item
            case Chain(item, rest):
                # The outer Chain goes, the cursor now owns rest
                self._held = rest
                return item
            case shape:
                raise MalformedListError("can't advance over this", shape)

    def __repr__(self) -> str:
        return f"Cursor({self._held!r})"
