import pytest

from recursive_list import (
    Chain,
    Empty,
    MalformedListError,
    RecursiveList,
    Single,
    check_well_formed,
)
from recursive_list.transitions import to_chain, to_single


def test_chain_with_empty_rest():
    with pytest.raises(MalformedListError):
        Chain(1, RecursiveList())


def test_chain_rest_not_a_list():
    with pytest.raises(MalformedListError):
        Chain(1, Single(2))  # type: ignore


def test_to_single_only_from_empty():
    assert Single(1) == to_single(Empty(), 1)
    with pytest.raises(MalformedListError):
        to_single(Single(0), 1)


def test_to_chain_only_from_single():
    chain = to_chain(Single(1), 2)
    assert 1 == chain.item
    assert Single(2) == chain.rest.shape

    with pytest.raises(MalformedListError):
        to_chain(Empty(), 2)


def test_push_onto_junk():
    rlist = RecursiveList[int](object())  # type: ignore
    with pytest.raises(MalformedListError, match="push"):
        rlist.push(1)


def test_pop_from_junk():
    rlist = RecursiveList[int]("junk")  # type: ignore
    with pytest.raises(MalformedListError):
        rlist.pop()


def test_advance_over_junk():
    cursor = RecursiveList[int](42).into_cursor()  # type: ignore
    with pytest.raises(MalformedListError):
        cursor.advance()


def test_check_well_formed():
    check_well_formed(RecursiveList())
    check_well_formed(RecursiveList.from_items(range(10)))

    rlist = RecursiveList.from_items([1, 2])
    match rlist.shape:
        case Chain(_, rest):
            rest.shape = Empty()
    with pytest.raises(MalformedListError):
        check_well_formed(rlist)


def test_popping_a_rest_from_outside():
    rlist = RecursiveList.from_items([1, 2])
    match rlist.shape:
        case Chain(_, rest):
            rest.pop()
    with pytest.raises(MalformedListError, match="Empty"):
        check_well_formed(rlist)
