from .chart import Action, BaseChart, Chart, HoldLinks, new_action, new_chart
from .enum import ActionType, HoldRole
from .errors import (
    ChartError,
    InvalidHoldDuration,
    InvalidSlideOffset,
    InvalidStartLane,
    InvalidTime,
    InvalidType,
    MalformedChain,
)
from .hold_chain import build_hold_chain
from .version import __version__
