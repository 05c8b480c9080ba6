from enum import Enum


class ActionType(str, Enum):
    TAP = "tap"
    SLIDE = "slide"
    HOLD = "hold"


class HoldRole(str, Enum):
    """Position of an action inside a hold chain"""

    NONE = "none"  # not part of a chain
    START = "start"
    MOVE = "move"
    END = "end"
