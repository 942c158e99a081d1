"""
Chart-Data Formatter - merges actuals and forecast series into chart rows.
"""

from datetime import date
from typing import Sequence

from dealerdesk.common.dataclasses import ChartRow, ForecastResult, TimePoint
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.core.services.months import future_month_dates, parse_date


def format_for_chart(
    historical: Sequence[TimePoint],
    predictions: Sequence[TimePoint],
    lower_bounds: Sequence[TimePoint],
    upper_bounds: Sequence[TimePoint],
) -> list[ChartRow]:
    """
    Build one row per historical point and one per forecast step, sorted by date.

    The sort is stable on date alone, so rows sharing a date keep insertion
    order (history before forecast). A boundary row carrying both an actual
    and a predicted value must be supplied by the caller.
    """
    if not (len(predictions) == len(lower_bounds) == len(upper_bounds)):
        raise InvalidInputError(
            "Forecast sequences differ in length: "
            f"predictions={len(predictions)} lower={len(lower_bounds)} upper={len(upper_bounds)}"
        )

    rows = [ChartRow(date=point.date, actual=point.value) for point in historical]
    for predicted, lower, upper in zip(predictions, lower_bounds, upper_bounds):
        rows.append(ChartRow(
            date=predicted.date,
            predicted=predicted.value,
            lower_bound=lower.value,
            upper_bound=upper.value,
        ))

    return sorted(rows, key=lambda row: parse_date(row.date))


def date_forecast(result: ForecastResult[float], last_date: str | date) -> ForecastResult[TimePoint]:
    """
    Attach monthly dates to a numeric forecast, starting the month after `last_date`.
    """
    labels = [d.isoformat() for d in future_month_dates(last_date, result.horizon)]

    def _points(values):
        return tuple(TimePoint(date=label, value=value) for label, value in zip(labels, values))

    return ForecastResult(
        predictions=_points(result.predictions),
        lower_bounds=_points(result.lower_bounds),
        upper_bounds=_points(result.upper_bounds),
        confidence_interval=result.confidence_interval,
    )
