"""Errors raised when a chart or one of its actions would break an invariant

They all derive from ValueError so callers that only care about "bad input"
can keep catching that"""


class ChartError(ValueError):
    pass


class InvalidTime(ChartError):
    pass


class InvalidType(ChartError):
    pass


class InvalidHoldDuration(ChartError):
    pass


class InvalidStartLane(ChartError):
    pass


class InvalidSlideOffset(ChartError):
    pass


class MalformedChain(ChartError):
    pass
