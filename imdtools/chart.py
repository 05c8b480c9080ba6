"""Provides the Chart class, the central model for IMD charts, and the
Action class for the timed events it holds

Every loader builds a Chart through new_chart, new_action and
build_hold_chain, every dumper reads one back. Actions can't be created or
modified without going through the checks in imdtools.validation.

Times are in milliseconds, lanes are indices counted from the left, starting
at 0"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from imdtools.enum import ActionType, HoldRole
from imdtools.utils import Number, is_integer
from imdtools.validation import ACTION_FIELDS, validate_action

DEFAULT_ACTION_FIELDS: Mapping[str, Any] = {
    "time": 0,
    "type": ActionType.TAP,
    "start_lane": 0,
    "hold_duration": 0,
    "slide_offset": 0,
}


@dataclass
class BaseChart:
    """Metadata every chart has, whatever the playfield looks like"""

    name: str = ""
    difficulty: str = "ez"
    duration: int = 0
    bpm: float = 150

    def __post_init__(self) -> None:
        if not is_integer(self.duration) or self.duration < 0:
            raise ValueError(
                f"chart duration has to be a non-negative integer : {self.duration!r}"
            )
        if self.bpm <= 0:
            raise ValueError(f"bpm has to be strictly positive : {self.bpm}")


@dataclass
class HoldLinks:
    """Indices (in Chart.actions) of the neighbours of an action inside its
    hold chain, all None when the action is not part of one"""

    head: Optional[int] = None
    tail: Optional[int] = None
    prev: Optional[int] = None
    next: Optional[int] = None


@dataclass
class Chart(BaseChart):
    lane_count: int = 4
    # authoring order, not necessarily time order
    actions: List[Action] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if not is_integer(self.lane_count) or self.lane_count < 1:
            raise ValueError(
                f"a chart needs a whole, positive number of lanes : {self.lane_count!r}"
            )

    def append(self, action: Action) -> None:
        if action.chart is not self:
            raise ValueError("This action belongs to another chart")
        if any(a is action for a in self.actions):
            raise ValueError("This action has already been added to the chart")

        self.actions.append(action)

    def extend(self, actions: List[Action]) -> None:
        """All or nothing version of append"""
        for action in actions:
            if action.chart is not self:
                raise ValueError("This action belongs to another chart")

        known = set(map(id, self.actions))
        new = set(map(id, actions))
        if known & new or len(new) != len(actions):
            raise ValueError("The same action can't be added twice to a chart")

        self.actions.extend(actions)

    def iter_type(self, type_: ActionType) -> Iterator[Action]:
        return (a for a in self.actions if a.type == type_)

    def taps(self) -> Iterator[Action]:
        return self.iter_type(ActionType.TAP)

    def slides(self) -> Iterator[Action]:
        return self.iter_type(ActionType.SLIDE)

    def holds(self) -> Iterator[Action]:
        return self.iter_type(ActionType.HOLD)

    def hold_chains(self) -> Iterator[List[Action]]:
        # import here to avoid a circular import, hold_chain needs Action
        from imdtools.hold_chain import iter_hold_chain

        for action in self.actions:
            if action.role == HoldRole.START:
                yield list(iter_hold_chain(self, action))


def new_chart(**options: Any) -> Chart:
    return Chart(**options)


@dataclass(init=False)
class Action:
    """A single tap, slide or hold, tied to the chart whose bounds it has to
    respect. The chart is only ever read from, never modified"""

    chart: Chart = field(compare=False, repr=False)
    time: Number = 0
    type: ActionType = ActionType.TAP
    start_lane: Number = 0
    hold_duration: Number = 0
    slide_offset: Number = 0
    role: HoldRole = HoldRole.NONE
    links: HoldLinks = field(default_factory=HoldLinks)

    def __init__(self, chart: Chart, **options: Any) -> None:
        self.chart = chart
        fields = validate_action(chart, DEFAULT_ACTION_FIELDS, options)
        self._commit(fields)
        self.role = HoldRole.NONE
        self.links = HoldLinks()

    @property
    def end_time(self) -> Number:
        return self.time + self.hold_duration

    @property
    def end_lane(self) -> Number:
        return self.start_lane + self.slide_offset

    def options(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in ACTION_FIELDS}

    def set(self, **options: Any) -> None:
        """Update some of the fields, the others keep their current value.
        Nothing changes if any of the given values is refused"""
        fields = validate_action(self.chart, self.options(), options)
        self._commit(fields)

    def _commit(self, fields: Mapping[str, Any]) -> None:
        for name in ACTION_FIELDS:
            setattr(self, name, fields[name])

    @classmethod
    def tap(cls, chart: Chart, time: Number, lane: Number) -> Action:
        return cls(chart, type=ActionType.TAP, time=time, start_lane=lane)

    @classmethod
    def slide(cls, chart: Chart, time: Number, lane: Number, offset: Number) -> Action:
        return cls(
            chart,
            type=ActionType.SLIDE,
            time=time,
            start_lane=lane,
            slide_offset=offset,
        )

    @classmethod
    def hold(cls, chart: Chart, time: Number, lane: Number, duration: Number) -> Action:
        return cls(
            chart,
            type=ActionType.HOLD,
            time=time,
            start_lane=lane,
            hold_duration=duration,
        )


def new_action(chart: Chart, options: Mapping[str, Any]) -> Action:
    return Action(chart, **options)
