from pathlib import Path
from typing import Any, Dict, Protocol

from imdtools.chart import Chart


class Dumper(Protocol):
    """A Dumper is a callable that takes in a Chart object, a Path hint and
    potential options, then gives back a dict that maps file name suggestions
    to the binary content of the file"""

    def __call__(self, chart: Chart, path: Path, **kwargs: Any) -> Dict[Path, bytes]:
        ...


class Loader(Protocol):
    """A Loader deserializes a Path to a Chart object and possibly takes in
    some options via the kwargs.
    Loaders may only build the Chart through the construction API (new_chart,
    new_action, build_hold_chain), any ChartError it raises is let through
    as is"""

    def __call__(self, path: Path, **kwargs: Any) -> Chart:
        ...
