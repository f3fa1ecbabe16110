from typing import TypeVar

from recursive_list import Chain, Empty, RecursiveList, Single
from recursive_list.asserts import MalformedListError

T = TypeVar("T")


def pop(rlist: RecursiveList[T]) -> T | None:
    match rlist.shape:
        case Empty():
            return None
        case Single(item):
            rlist.shape = Empty()
            return item
        case Chain(item, rest):
            # rest's wrapper is dropped and its shape moves up a level
            rlist.shape = take(rest).shape
            return item
        case shape:
            raise MalformedListError("can't pop from this", shape)


def take(rlist: RecursiveList[T]) -> RecursiveList[T]:
    """Move the contents out, leaving `rlist` Empty"""
    taken = RecursiveList(rlist.shape)
    rlist.shape = Empty()
    return taken
