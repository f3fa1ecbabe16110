from typing import Iterable, TypeVar

from recursive_list import Chain, RecursiveList, Single
from recursive_list.walk import peek_items

T = TypeVar("T")


def from_items(items: Iterable[T]) -> RecursiveList[T]:
    # Built back to front so each Chain is handed an already
    # finished rest
    rest: RecursiveList[T] | None = None
    for item in reversed(list(items)):
        if rest is None:
            rest = RecursiveList(Single(item))
        else:
            rest = RecursiveList(Chain(item, rest))

    return RecursiveList() if rest is None else rest


def clone(rlist: RecursiveList[T]) -> RecursiveList[T]:
    """
    Deep copy of the chain. The items themselves are shared, which
    is fine as long as they're plain values
    """
    return from_items(peek_items(rlist))
