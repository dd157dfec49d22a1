import enum
import logging
from typing import List, Sequence

__all__ = ["assemble_border", "flip"]


log = logging.getLogger(__name__)


class _Placement(enum.Enum):
    NOT_FOUND = 0
    AFTER = 1
    BEFORE = 2
    FLIP_AFTER = 3
    FLIP_BEFORE = 4


def flip(member: str) -> str:
    """Reverse the order of the coordinate lines of a member."""
    lines = member.split("\n")
    lines.reverse()
    return "\n".join(lines)


def assemble_border(members: Sequence[Sequence[str]], name: str | None = None) -> str:
    """Chain the member ways of a region into a continuous border.

    Members are taken in order. Each member that is not yet placed seeds a
    chain, and the remaining members are attached to either end of that chain,
    flipped if needed, until a full pass over them places nothing. A seed that
    never grew is dropped unless it is the only member, as are members that no
    surviving chain reached.
    Coordinates are matched on their exact text, shared points at the joins are
    kept on both sides.
    """
    sources = ["\n".join(member) for member in members]
    sources = [source for source in sources if source]
    slots: List[str] = []
    # a way listed twice, in either direction, is still a single way
    distinct = {min(source, flip(source)) for source in sources}

    for seed in sources:
        if _is_placed(seed, slots):
            continue
        start = len(slots)
        slots.append(seed)
        end = start + 1
        grown = True
        while grown:
            grown = False
            for candidate in sources:
                if _is_placed(candidate, slots):
                    continue
                placement = _test_placement(slots[start], slots[end - 1], candidate)
                if placement is _Placement.AFTER:
                    slots.insert(end, candidate)
                elif placement is _Placement.BEFORE:
                    slots.insert(start, candidate)
                elif placement is _Placement.FLIP_AFTER:
                    slots.insert(end, flip(candidate))
                elif placement is _Placement.FLIP_BEFORE:
                    slots.insert(start, flip(candidate))
                else:
                    continue
                end += 1
                grown = True
        if end - start == 1 and len(distinct) > 1:
            log.debug(f"dropping way without neighbour in '{name}'")
            del slots[start]

    log.debug(f"region '{name}': kept {len(slots)}/{len(sources)} way(s)")
    return "\n".join(slots)


def _is_placed(member: str, slots: List[str]) -> bool:
    return member in slots or flip(member) in slots


def _test_placement(chain_head: str, chain_tail: str, candidate: str) -> _Placement:
    chain_first = _first_line(chain_head)
    chain_last = _last_line(chain_tail)
    if chain_last == _first_line(candidate):
        return _Placement.AFTER
    if _last_line(candidate) == chain_first:
        return _Placement.BEFORE
    flipped = flip(candidate)
    if chain_last == _first_line(flipped):
        return _Placement.FLIP_AFTER
    if _last_line(flipped) == chain_first:
        return _Placement.FLIP_BEFORE
    return _Placement.NOT_FOUND


def _first_line(value: str) -> str:
    return value.split("\n", 1)[0]


def _last_line(value: str) -> str:
    return value.rsplit("\n", 1)[-1]
