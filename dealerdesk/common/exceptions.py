"""
Errors raised by the forecasting core.
"""


class InvalidInputError(ValueError):
    """
    Raised when a series or horizon cannot produce a meaningful forecast.

    Covers empty series, non-positive horizons, series shorter than a model's
    minimum, non-finite values and malformed dates. Raised before any
    arithmetic so NaN never reaches the chart.
    """
