import hypothesis.strategies as st
import pytest
from hypothesis import given

from imdtools.chart import Action, Chart, HoldLinks, new_action, new_chart
from imdtools.enum import ActionType, HoldRole
from imdtools.hold_chain import build_hold_chain
from imdtools.testutils import strategies as imdst


def test_chart_defaults() -> None:
    chart = new_chart()
    assert chart.name == ""
    assert chart.difficulty == "ez"
    assert chart.duration == 0
    assert chart.bpm == 150
    assert chart.lane_count == 4
    assert chart.actions == []


def test_chart_overrides() -> None:
    chart = new_chart(name="Kagerou", duration=90_000, bpm=200, lane_count=6)
    assert chart.name == "Kagerou"
    assert chart.difficulty == "ez"
    assert chart.duration == 90_000
    assert chart.lane_count == 6


@pytest.mark.parametrize(
    "options",
    [
        {"duration": -1},
        {"bpm": 0},
        {"bpm": -120},
        {"lane_count": 0},
        {"duration": 1000.5},
        {"duration": 1000.0},
        {"lane_count": 4.0},
    ],
)
def test_that_out_of_range_metadata_is_refused(options: dict) -> None:
    with pytest.raises(ValueError):
        new_chart(**options)


def test_action_defaults() -> None:
    chart = new_chart(duration=1000)
    action = new_action(chart, {})
    assert action.time == 0
    assert action.type == ActionType.TAP
    assert action.start_lane == 0
    assert action.hold_duration == 0
    assert action.slide_offset == 0
    assert action.role == HoldRole.NONE
    assert action.links == HoldLinks()


def test_that_string_types_are_normalized() -> None:
    chart = new_chart(duration=1000)
    action = new_action(chart, {"type": "hold", "time": 10, "hold_duration": 20})
    assert action.type is ActionType.HOLD


def test_that_creating_an_action_does_not_add_it_to_the_chart() -> None:
    chart = new_chart(duration=1000)
    Action.tap(chart, 0, 0)
    assert chart.actions == []


def test_factories() -> None:
    chart = new_chart(duration=1000)
    tap = Action.tap(chart, 100, 3)
    assert (tap.type, tap.time, tap.start_lane) == (ActionType.TAP, 100, 3)
    slide = Action.slide(chart, 200, 3, -2)
    assert (slide.type, slide.end_lane, slide.end_time) == (ActionType.SLIDE, 1, 200)
    hold = Action.hold(chart, 300, 1, 500)
    assert (hold.type, hold.end_lane, hold.end_time) == (ActionType.HOLD, 1, 800)


@given(imdst.empty_chart(duration_strat=st.integers(1, 100_000)), st.data())
def test_derived_fields(chart: Chart, data: st.DataObject) -> None:
    action = Action(chart, **data.draw(imdst.action_options(chart)))
    assert action.end_time == action.time + action.hold_duration
    assert action.end_lane == action.start_lane + action.slide_offset


def test_that_equality_ignores_the_chart() -> None:
    a = Action.tap(new_chart(duration=1000), 10, 1)
    b = Action.tap(new_chart(duration=2000, lane_count=2), 10, 1)
    assert a == b
    assert "chart" not in repr(a)


def test_append() -> None:
    chart = new_chart(duration=1000)
    tap = Action.tap(chart, 10, 1)
    chart.append(tap)
    assert chart.actions == [tap]


def test_that_appending_twice_is_refused() -> None:
    chart = new_chart(duration=1000)
    tap = Action.tap(chart, 10, 1)
    chart.append(tap)
    with pytest.raises(ValueError):
        chart.append(tap)
    with pytest.raises(ValueError):
        chart.extend([tap])
    assert len(chart.actions) == 1


def test_that_actions_from_another_chart_are_refused() -> None:
    chart = new_chart(duration=1000)
    other = new_chart(duration=1000)
    with pytest.raises(ValueError):
        chart.append(Action.tap(other, 10, 1))
    with pytest.raises(ValueError):
        chart.extend([Action.tap(chart, 10, 1), Action.tap(other, 10, 1)])
    assert chart.actions == []


def test_iterating_by_type() -> None:
    chart = new_chart(duration=1000)
    chart.append(Action.tap(chart, 0, 0))
    chart.append(Action.hold(chart, 0, 1, 100))
    chart.append(Action.tap(chart, 10, 2))
    build_hold_chain(chart, 200, 0, False, [2, 100])
    assert [a.time for a in chart.taps()] == [0, 10]
    assert [a.time for a in chart.holds()] == [0, 200]
    assert [a.start_lane for a in chart.slides()] == [0]


def test_hold_chains() -> None:
    chart = new_chart(duration=1000)
    chart.append(Action.tap(chart, 0, 0))
    first = build_hold_chain(chart, 0, 1, True, [100, 1, 100])
    chart.append(Action.tap(chart, 0, 3))
    second = build_hold_chain(chart, 500, 3, False, [-3, 100])
    assert list(chart.hold_chains()) == [first, second]
