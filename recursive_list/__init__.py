from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeAlias, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Single(Generic[T]):
    item: T
    """The logical tail of the list"""


@dataclass(frozen=True)
class Chain(Generic[T]):
    item: T
    rest: RecursiveList[T]
    """
    Owned exclusively by this chain, never Empty. Only push and pop
    reshape it; mutating it from outside can leave an Empty rest
    behind, which check_well_formed will report
    """

    def __post_init__(self):
        assert_rest_not_empty(self)


Shape: TypeAlias = Empty | Single[T] | Chain[T]


class RecursiveList(Generic[T]):
    """
    A list whose tail is itself a list. The wrapper is the slot that
    gets reshaped; the shapes themselves never change.

    Iterating it (`iter`, `for`, `map` etc.) moves the contents into
    a Cursor and leaves this list Empty, so `clone` first if you still
    need it afterwards.
    """

    __slots__ = ("shape",)

    def __init__(self, shape: Shape[T] | None = None):
        self.shape: Shape[T] = Empty() if shape is None else shape

    @staticmethod
    def new() -> RecursiveList[T]:
        return RecursiveList()

    @staticmethod
    def from_items(items: Iterable[T]) -> RecursiveList[T]:
        return from_items(items)

    def push(self, item: T) -> None:
        push(self, item)

    def pop(self) -> T | None:
        return pop(self)

    def take(self) -> RecursiveList[T]:
        return take(self)

    def clone(self) -> RecursiveList[T]:
        return clone(self)

    def into_cursor(self) -> Cursor[T]:
        return Cursor(self)

    @property
    def chain_depth(self) -> int:
        return chain_depth(self)

    def __iter__(self) -> Iterator[T]:
        return self.into_cursor()

    def __contains__(self, item: object) -> bool:
        # Without this `in` would fall back to __iter__ and eat the list
        return any(item == x for x in peek_items(self))

    def __len__(self) -> int:
        return length(self)

    def __bool__(self) -> bool:
        return not isinstance(self.shape, Empty)

    def __repr__(self) -> str:
        return f"RecursiveList.from_items({list(peek_items(self))!r})"


# Implementations
from recursive_list.asserts import (
    MalformedListError,
    assert_rest_not_empty,
    check_well_formed,
)
from recursive_list.clone import clone, from_items
from recursive_list.cursor import Cursor
from recursive_list.pop import pop, take
from recursive_list.push import push
from recursive_list.walk import chain_depth, length, peek_items

__all__ = [
    "Chain",
    "Cursor",
    "Empty",
    "MalformedListError",
    "RecursiveList",
    "Shape",
    "Single",
    "check_well_formed",
]
