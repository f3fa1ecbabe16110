from typing import TypeVar

from recursive_list import Chain, Empty, RecursiveList, Single
from recursive_list.asserts import MalformedListError
from recursive_list.transitions import to_chain, to_single

T = TypeVar("T")


def push(rlist: RecursiveList[T], item: T) -> None:
    # Each Chain hands the push on to its rest, so this walks to the
    # tail (as a loop, long lists would blow the recursion limit)
    level = rlist
    while True:
        match level.shape:
            case Empty():
                level.shape = to_single(level.shape, item)
                return
            case Single():
                level.shape = to_chain(level.shape, item)
                return
            case Chain(rest=rest):
                level = rest
            case shape:
                raise MalformedListError("can't push onto this", shape)
