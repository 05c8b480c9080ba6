import warnings
from functools import singledispatch
from pathlib import Path
from typing import Any, Dict

import simplejson as json

from imdtools.chart import Chart, new_action, new_chart
from imdtools.hold_chain import build_hold_chain

from . import schema as imd


def load_imd_json(path: Path, strict: bool = False, **kwargs: Any) -> Chart:
    with path.open(encoding="utf-8") as f:
        raw_json = json.load(f)

    return load_file(raw_json, strict=strict)


def load_file(raw_json: Any, strict: bool = False) -> Chart:
    file: imd.File = imd.FILE_SCHEMA.load(raw_json)
    if file.version != imd.VERSION:
        message = (
            f"This file was written for version {file.version} of imd-json, "
            f"only version {imd.VERSION} is supported"
        )
        if strict:
            raise ValueError(message)
        else:
            warnings.warn(message + ", loading it anyway")

    chart = load_metadata(file.metadata)
    for entry in file.actions:
        load_entry(entry, chart)

    return chart


def load_metadata(m: imd.Metadata) -> Chart:
    options: Dict[str, Any] = {
        "name": m.name,
        "difficulty": m.difficulty,
        "duration": m.duration,
        "bpm": m.bpm,
        "lane_count": m.lanes,
    }
    return new_chart(**{k: v for k, v in options.items() if v is not None})


@singledispatch
def load_entry(e: imd.Entry, chart: Chart) -> None:
    raise NotImplementedError(f"Unknown action entry : {type(e)}")


@load_entry.register
def load_single(e: imd.Single, chart: Chart) -> None:
    options: Dict[str, Any] = {"type": e.type, "time": e.time, "start_lane": e.lane}
    if e.duration is not None:
        options["hold_duration"] = e.duration
    if e.offset is not None:
        options["slide_offset"] = e.offset

    chart.append(new_action(chart, options))


@load_entry.register
def load_chain(e: imd.Chain, chart: Chart) -> None:
    build_hold_chain(
        chart,
        time=e.time,
        start_lane=e.lane,
        begin_with_hold=(e.chain == "hold"),
        durations=e.durations,
    )
