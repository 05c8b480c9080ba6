from pathlib import Path
from typing import Any, Dict, Iterator, List

import simplejson as json

from imdtools.chart import Action, Chart
from imdtools.enum import ActionType, HoldRole
from imdtools.hold_chain import check_hold_chain, iter_hold_chain

from . import schema as imd


def dump_imd_json(
    chart: Chart, path: Path, indent: int = 4, **kwargs: Any
) -> Dict[Path, bytes]:
    if path.is_dir():
        filepath = path / f"{chart.name or 'chart'}.imd.json"
    else:
        filepath = path

    json_file = imd.FILE_SCHEMA.dump(dump_file(chart))
    contents = json.dumps(json_file, indent=indent, ensure_ascii=False)
    return {filepath: contents.encode("utf-8")}


def dump_file(chart: Chart) -> imd.File:
    return imd.File(
        version=imd.VERSION,
        metadata=dump_metadata(chart),
        actions=list(iter_entries(chart)),
    )


def dump_metadata(chart: Chart) -> imd.Metadata:
    return imd.Metadata(
        name=chart.name,
        difficulty=chart.difficulty,
        duration=chart.duration,
        bpm=chart.bpm,
        lanes=chart.lane_count,
    )


def iter_entries(chart: Chart) -> Iterator[imd.Entry]:
    for action in chart.actions:
        if action.role == HoldRole.NONE:
            yield dump_single(action)
        elif action.role == HoldRole.START:
            check_hold_chain(chart, action)
            yield dump_chain(list(iter_hold_chain(chart, action)))
        # the other segments of a chain are written along with its start


def dump_single(action: Action) -> imd.Single:
    single = imd.Single(
        type=action.type.value,
        time=action.time,
        lane=action.start_lane,
    )
    if action.type == ActionType.HOLD:
        single.duration = action.hold_duration
    elif action.type == ActionType.SLIDE:
        single.offset = action.slide_offset

    return single


def dump_chain(chain: List[Action]) -> imd.Chain:
    head = chain[0]
    return imd.Chain(
        chain=head.type.value,
        time=head.time,
        lane=head.start_lane,
        durations=[segment_duration(s) for s in chain],
    )


def segment_duration(segment: Action) -> Any:
    if segment.type == ActionType.HOLD:
        return segment.hold_duration
    else:
        return segment.slide_offset
