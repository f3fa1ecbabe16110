from typing import Any

from recursive_list import Chain, Empty, RecursiveList, Single


class MalformedListError(Exception):
    """
    A list reached a shape it can't be in if it was only ever built
    with push and pop. Not something to recover from.
    """

    def __init__(self, reason: str, shape: Any):
        super().__init__(f"Malformed list: {reason} (got {shape!r})")
        self.shape = shape


def assert_rest_not_empty(chain: Chain[Any]) -> None:
    if not isinstance(chain.rest, RecursiveList):
        raise MalformedListError(
            "a Chain's rest must be a RecursiveList", chain.rest
        )

    if isinstance(chain.rest.shape, Empty):
        raise MalformedListError(
            "a Chain's rest can't be Empty, that's a Single",
            chain,
        )


def assert_shape(shape: Any) -> None:
    if not isinstance(shape, (Empty, Single, Chain)):
        raise MalformedListError("not a list shape", shape)


def check_well_formed(rlist: RecursiveList[Any]) -> None:
    """Walks the whole list, so O(n)"""
    for level in iter_levels(rlist):
        assert_shape(level.shape)
        if isinstance(level.shape, Chain):
            assert_rest_not_empty(level.shape)


from recursive_list.walk import iter_levels
