from typing import Iterator, TypeVar

from recursive_list import Chain, Empty, RecursiveList, Single
from recursive_list.asserts import MalformedListError

T = TypeVar("T")


def iter_levels(rlist: RecursiveList[T]) -> Iterator[RecursiveList[T]]:
    """
    Every nested list from the outermost one down to the tail,
    without consuming anything. Internal: the public way through a
    list is a Cursor.
    """
    level = rlist
    while True:
        yield level
        match level.shape:
            case Chain(rest=rest):
                level = rest
            case Single() | Empty():
                return
            case shape:
                raise MalformedListError("not a list shape", shape)


def peek_items(rlist: RecursiveList[T]) -> Iterator[T]:
    for level in iter_levels(rlist):
        match level.shape:
            case Single(item) | Chain(item):
                yield item
            case Empty():
                return


def length(rlist: RecursiveList[T]) -> int:
    return sum(1 for _ in peek_items(rlist))


def chain_depth(rlist: RecursiveList[T]) -> int:
    return sum(
        1
        for level in iter_levels(rlist)
        if isinstance(level.shape, Chain)
    )
