"""
Hypothesis strategies to generate actions and charts
"""

from typing import Any, Dict, List

import hypothesis.strategies as st

from imdtools.chart import Action, Chart
from imdtools.enum import ActionType
from imdtools.hold_chain import build_hold_chain

# chart names end up in file names when dumping to a folder
FILENAME_SAFE = "abcdefghijklmnopqrstuvwxyz0123456789 -_"


@st.composite
def chart_metadata(
    draw: st.DrawFn,
    duration_strat: st.SearchStrategy[int] = st.integers(
        min_value=0, max_value=600_000
    ),
    lanes_strat: st.SearchStrategy[int] = st.integers(min_value=1, max_value=8),
) -> Dict[str, Any]:
    return {
        "name": draw(st.text(alphabet=FILENAME_SAFE, max_size=30)),
        "difficulty": draw(st.sampled_from(["ez", "nm", "hd"])),
        "duration": draw(duration_strat),
        "bpm": draw(st.integers(min_value=1, max_value=400)),
        "lane_count": draw(lanes_strat),
    }


@st.composite
def empty_chart(draw: st.DrawFn, **kwargs: Any) -> Chart:
    return Chart(**draw(chart_metadata(**kwargs)))


@st.composite
def action_options(draw: st.DrawFn, chart: Chart) -> Dict[str, Any]:
    """Options that are valid for the given chart"""
    type_ = draw(st.sampled_from(list(ActionType)))
    time = draw(st.integers(min_value=0, max_value=chart.duration))
    lane = draw(st.integers(min_value=0, max_value=chart.lane_count - 1))
    options: Dict[str, Any] = {"type": type_, "time": time, "start_lane": lane}
    if type_ == ActionType.HOLD:
        options["hold_duration"] = draw(
            st.integers(min_value=0, max_value=chart.duration - time)
        )
    elif type_ == ActionType.SLIDE:
        options["slide_offset"] = draw(
            st.integers(min_value=-lane, max_value=chart.lane_count - 1 - lane)
        )

    return options


@st.composite
def action(draw: st.DrawFn, chart: Chart) -> Action:
    """A valid action, sometimes edited through Action.set after its creation"""
    a = Action(chart, **draw(action_options(chart)))
    edit = draw(st.sampled_from(["none", "type", "everything"]))
    if edit == "type":
        a.set(type=draw(st.sampled_from(list(ActionType))))
    elif edit == "everything":
        a.set(**draw(action_options(chart)))

    return a


def non_integral() -> st.SearchStrategy[Any]:
    """Numbers a chart should refuse for its times, lanes and durations"""
    return st.one_of(
        st.floats().filter(lambda f: not f.is_integer()),
        st.integers(min_value=-10_000, max_value=10_000).map(float),
        st.fractions().filter(lambda f: f.denominator != 1),
    )


@st.composite
def chain_durations(
    draw: st.DrawFn,
    chart: Chart,
    time: int,
    lane: int,
    begin_with_hold: bool,
    max_segments: int = 8,
) -> List[int]:
    """Segment durations that keep the whole chain inside the chart"""
    size = draw(st.integers(min_value=2, max_value=max_segments))
    durations = []
    is_hold = begin_with_hold
    for _ in range(size):
        if is_hold:
            duration = draw(st.integers(min_value=0, max_value=chart.duration - time))
            time += duration
        else:
            duration = draw(
                st.integers(min_value=-lane, max_value=chart.lane_count - 1 - lane)
            )
            lane += duration
        durations.append(duration)
        is_hold = not is_hold

    return durations


@st.composite
def chart(draw: st.DrawFn, max_actions: int = 10, **kwargs: Any) -> Chart:
    """A chart filled with single actions and hold chains"""
    c = draw(empty_chart(**kwargs))
    for _ in range(draw(st.integers(min_value=0, max_value=max_actions))):
        if draw(st.booleans()):
            c.append(draw(action(c)))
        else:
            time = draw(st.integers(min_value=0, max_value=c.duration))
            lane = draw(st.integers(min_value=0, max_value=c.lane_count - 1))
            begin_with_hold = draw(st.booleans())
            durations = draw(chain_durations(c, time, lane, begin_with_hold))
            build_hold_chain(c, time, lane, begin_with_hold, durations)

    return c
