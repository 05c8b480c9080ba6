"""Hold chains : one continuous gesture made of alternating hold and slide
segments, each one starting where (and when) the previous one ends.

    time ↓   lane →
        0 1 2 3
        ■           hold (start)
        ┃
        ┗━━━■       slide +2 (move)
            ┃
            ┃       hold (end)

The segments are ordinary actions stored in Chart.actions, they are tied
together by HoldLinks holding indices into that list."""

from typing import Iterator, List, Sequence

from more_itertools import windowed

from imdtools.chart import Action, Chart, HoldLinks
from imdtools.enum import ActionType, HoldRole
from imdtools.errors import MalformedChain
from imdtools.utils import Number


def build_hold_chain(
    chart: Chart,
    time: Number,
    start_lane: Number,
    begin_with_hold: bool,
    durations: Sequence[Number],
) -> List[Action]:
    """Create the chain and append it to the chart. Each duration is read
    as a hold duration or a slide offset depending on the kind of segment it
    ends up in. The chart is left untouched if any segment is invalid"""
    if len(durations) < 2:
        raise MalformedChain(
            f"A hold chain needs at least 2 segments, got {len(durations)}"
        )

    base = len(chart.actions)
    first, *others = durations
    if begin_with_hold:
        head = Action.hold(chart, time, start_lane, first)
    else:
        head = Action.slide(chart, time, start_lane, first)

    chain = [head]
    head.role = HoldRole.START
    head.links = HoldLinks(head=base, tail=base)

    for duration in others:
        tail = chain[-1]
        if tail.type == ActionType.SLIDE:
            segment = Action.hold(chart, tail.end_time, tail.end_lane, duration)
        else:
            segment = Action.slide(chart, tail.end_time, tail.end_lane, duration)
        _push(chain, segment, base)

    chart.extend(chain)
    return chain


def _push(chain: List[Action], segment: Action, base: int) -> None:
    head = chain[0]
    if head.role != HoldRole.START or head.links.tail is None:
        raise MalformedChain("Could not find the start of the hold chain")

    tail_index = head.links.tail
    tail = chain[tail_index - base]
    index = base + len(chain)
    segment.role = HoldRole.END
    segment.links = HoldLinks(head=base, tail=index, prev=tail_index)
    if tail is not head:
        tail.role = HoldRole.MOVE
    tail.links.next = index

    chain.append(segment)
    for node in chain:
        node.links.tail = index


def iter_hold_chain(chart: Chart, action: Action) -> Iterator[Action]:
    """Iterate over the whole chain the action is part of, from start to
    end. Yields nothing for actions outside of any chain"""
    if action.role == HoldRole.NONE:
        return

    seen = set()
    index = action.links.head
    while index is not None:
        if index in seen:
            raise MalformedChain(f"Hold chain loops back to action {index}")
        if not 0 <= index < len(chart.actions):
            raise MalformedChain(f"Hold chain points outside the chart : {index}")

        seen.add(index)
        node = chart.actions[index]
        yield node
        index = node.links.next


def check_hold_chain(chart: Chart, head: Action) -> None:
    """Raise MalformedChain describing the first broken link found in the
    chain starting at head"""
    if head.role != HoldRole.START:
        raise MalformedChain(f"Expected a chain start, got a {head.role} action")

    chain = list(iter_hold_chain(chart, head))
    if len(chain) < 2:
        raise MalformedChain("A hold chain needs at least 2 segments")

    indices = [head.links.head] + [node.links.next for node in chain[:-1]]
    if chain[0] is not head:
        raise MalformedChain("The chain start does not point to itself")
    if head.links.tail != indices[-1]:
        raise MalformedChain("The chain start does not point to the last segment")

    for position, node in enumerate(chain):
        if position == 0:
            expected = HoldRole.START
        elif position == len(chain) - 1:
            expected = HoldRole.END
        else:
            expected = HoldRole.MOVE

        if node.role != expected:
            raise MalformedChain(
                f"Segment {position} of the chain is a {node.role} instead of "
                f"a {expected}"
            )
        if node.links.head != indices[0] or node.links.tail != indices[-1]:
            raise MalformedChain(f"Segment {position} has wrong head or tail links")

    for (prev_index, prev), (_, current) in windowed(zip(indices, chain), 2):
        if current.links.prev != prev_index:
            raise MalformedChain("Predecessor and successor links don't match")
        if current.type == prev.type:
            raise MalformedChain(
                f"Two consecutive {current.type} segments in the same chain"
            )
        if (current.time, current.start_lane) != (prev.end_time, prev.end_lane):
            raise MalformedChain("A segment does not start where the previous ends")
