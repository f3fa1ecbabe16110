from typing import TypeVar

from recursive_list import Chain, Empty, RecursiveList, Shape, Single
from recursive_list.asserts import MalformedListError

T = TypeVar("T")


def to_single(shape: Shape[T], item: T) -> Single[T]:
    match shape:
        case Empty():
            return Single(item)
        case _:
            raise MalformedListError(
                "only Empty can become a Single", shape
            )


def to_chain(shape: Shape[T], item: T) -> Chain[T]:
    """The old tail stays in front, the new item becomes the tail"""
    match shape:
        case Single(tail):
            return Chain(tail, RecursiveList(Single(item)))
        case _:
            raise MalformedListError(
                "only a Single can become a Chain", shape
            )
