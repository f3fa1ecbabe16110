import argparse
import sys
from typing import Callable, TypeAlias

from frozendict import frozendict

from recursive_list import RecursiveList

Scenario: TypeAlias = Callable[[bool], None]


def trace(trace_on: bool, what: str, rlist: RecursiveList[int]) -> None:
    if trace_on:
        print(f"{what}: {rlist!r}", file=sys.stderr)


def built(trace_on: bool, *items: int) -> RecursiveList[int]:
    rlist = RecursiveList[int].new()
    for item in items:
        rlist.push(item)
        trace(trace_on, f"push {item}", rlist)
    return rlist


def pop_front_first(trace_on: bool) -> None:
    rlist = built(trace_on, 10, 20, 30)
    for _ in range(3):
        print(rlist.pop())
        trace(trace_on, "pop", rlist)
    print("---")


def map_double(trace_on: bool) -> None:
    rlist = built(trace_on, 1, 2, 3, 4)
    for doubled in map(lambda x: x * 2, rlist.clone()):
        print(doubled)
    trace(trace_on, "after iterating a clone", rlist)


def enumerate_consuming(trace_on: bool) -> None:
    rlist = built(trace_on, 1, 2, 3, 4)
    for i, x in enumerate(rlist):
        print(f"iter2: {i}, {x}")
    trace(trace_on, "after iterating", rlist)


SCENARIOS = frozendict[str, Scenario](
    {
        "pop": pop_front_first,
        "double": map_double,
        "enumerate": enumerate_consuming,
    }
)

DEFAULT_SCENARIOS = tuple(SCENARIOS)


parser = argparse.ArgumentParser(
    prog="recursive_list",
    description="Demonstrates pushing, popping and consuming a RecursiveList",
)

parser.add_argument(
    "scenarios",
    nargs="*",
    metavar="scenario",
    help=f"which demonstrations to run, any of {', '.join(SCENARIOS)}"
    " [default: all of them]",
)

parser.add_argument(
    "--trace",
    help="print the list after every operation to stderr",
    action="store_true",
)

parser.add_argument(
    "--list",
    help="list the demonstrations and exit",
    action="store_true",
)


def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)

    if args.list:
        for name in SCENARIOS:
            print(name)
        return 0

    unknown = [name for name in args.scenarios if name not in SCENARIOS]
    if unknown:
        parser.error(f"unknown scenario(s): {', '.join(unknown)}")

    for name in args.scenarios or DEFAULT_SCENARIOS:
        SCENARIOS[name](args.trace)

    return 0


if __name__ == "__main__":
    sys.exit(main())
