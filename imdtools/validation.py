"""Checks run on every action before any of its fields get committed

Each check is a plain function that receives the chart whose bounds apply
and the merged candidate record (committed values overridden by the
update). It either returns silently or raises the matching ChartError.

Only the fields present in the update get checked, but a check that depends
on another field (hold duration needs the type and the time for instance)
always reads the resolved value from the merged record."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Tuple

from imdtools.enum import ActionType
from imdtools.errors import (
    InvalidHoldDuration,
    InvalidSlideOffset,
    InvalidStartLane,
    InvalidTime,
    InvalidType,
)
from imdtools.utils import is_integer

if TYPE_CHECKING:
    from imdtools.chart import Chart

ACTION_FIELDS = ("time", "type", "start_lane", "hold_duration", "slide_offset")

Check = Callable[["Chart", Mapping[str, Any]], None]


def check_time(chart: Chart, fields: Mapping[str, Any]) -> None:
    time = fields["time"]
    if not is_integer(time) or time < 0:
        raise InvalidTime(f"time must be a non-negative integer : {time!r}")

    if time > chart.duration:
        raise InvalidTime(
            f"time {time} exceeds the duration of the chart ({chart.duration} ms)"
        )


def check_type(chart: Chart, fields: Mapping[str, Any]) -> None:
    type_ = fields["type"]
    try:
        ActionType(type_)
    except ValueError:
        raise InvalidType(f"Invalid action type : {type_!r}") from None


def check_hold_duration(chart: Chart, fields: Mapping[str, Any]) -> None:
    duration = fields["hold_duration"]
    if not is_integer(duration) or duration < 0:
        raise InvalidHoldDuration(
            f"hold duration must be a non-negative integer : {duration!r}"
        )

    if fields["type"] != ActionType.HOLD:
        raise InvalidHoldDuration(
            f"hold duration can only be set on hold actions, not {fields['type']}"
        )

    end_time = fields["time"] + duration
    if not 0 <= end_time <= chart.duration:
        raise InvalidHoldDuration(
            f"hold ends at {end_time}, outside of the chart's "
            f"[0, {chart.duration}] ms range"
        )


def check_start_lane(chart: Chart, fields: Mapping[str, Any]) -> None:
    lane = fields["start_lane"]
    if not is_integer(lane):
        raise InvalidStartLane(f"start lane must be an integer : {lane!r}")

    if not 0 <= lane < chart.lane_count:
        raise InvalidStartLane(
            f"start lane {lane} out of [0, {chart.lane_count - 1}] range"
        )


def check_slide_offset(chart: Chart, fields: Mapping[str, Any]) -> None:
    offset = fields["slide_offset"]
    if not is_integer(offset):
        raise InvalidSlideOffset(f"slide offset must be an integer : {offset!r}")

    if fields["type"] != ActionType.SLIDE:
        raise InvalidSlideOffset(
            f"slide offset can only be set on slide actions, not {fields['type']}"
        )

    end_lane = fields["start_lane"] + offset
    if not 0 <= end_lane < chart.lane_count:
        raise InvalidSlideOffset(
            f"slide ends on lane {end_lane}, out of "
            f"[0, {chart.lane_count - 1}] range"
        )


# Order matters : type has to be known good before anything reads it
CHECKS: Tuple[Tuple[str, Check], ...] = (
    ("time", check_time),
    ("type", check_type),
    ("hold_duration", check_hold_duration),
    ("start_lane", check_start_lane),
    ("slide_offset", check_slide_offset),
)


def validate_action(
    chart: Chart, current: Mapping[str, Any], update: Mapping[str, Any]
) -> Dict[str, Any]:
    """Return the merged record of current and update if every field given
    in update passes its check, raise otherwise"""
    unknown = set(update) - set(ACTION_FIELDS)
    if unknown:
        raise TypeError(f"Unknown action fields : {', '.join(sorted(unknown))}")

    merged = {**current, **update}
    for name, check in CHECKS:
        if name in update:
            check(chart, merged)

    merged["type"] = ActionType(merged["type"])
    # a duration or an offset only means something for its own type, leftovers
    # from before a type change are dropped
    if merged["type"] != ActionType.HOLD:
        merged["hold_duration"] = 0
    if merged["type"] != ActionType.SLIDE:
        merged["slide_offset"] = 0

    return merged
