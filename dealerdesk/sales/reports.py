"""
Sales Reports - aggregates over recorded sales for the dashboard and for
feeding real history into the forecast simulators.
"""

import logging
from datetime import date
from typing import Literal

import pandas as pd
from django.db.models import Count, Prefetch, Q, Sum
from django.utils import timezone

from dealerdesk.common.dataclasses import TimePoint
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.core.services.months import add_months
from dealerdesk.inventory.models import Motorcycle, MotorcycleImage
from dealerdesk.sales.models import Sale

logger = logging.getLogger(__name__)

Metric = Literal["units", "revenue"]


def top_selling_models(limit: int | None = None) -> list[dict]:
    """
    Motorcycles ranked by units sold (cancelled sales excluded), with revenue
    and the primary (or first) image URL.
    """
    counted = ~Q(sales__status=Sale.Status.CANCELLED)
    queryset = (
        Motorcycle.objects
        .annotate(
            units_sold=Count('sales', filter=counted),
            total_sales=Sum('sales__sale_price', filter=counted),
        )
        .prefetch_related(Prefetch('images', queryset=MotorcycleImage.objects.order_by('-is_primary', 'id')))
        .order_by('-units_sold', 'make', 'model')
    )
    if limit:
        queryset = queryset[:limit]

    results = []
    for motorcycle in queryset:
        images = list(motorcycle.images.all())
        image_url = images[0].image_url if images else (motorcycle.image_url or None)
        results.append({
            "id": motorcycle.id,
            "make": motorcycle.make,
            "model": motorcycle.model,
            "price": motorcycle.price,
            "imageUrl": image_url,
            "unitsSold": motorcycle.units_sold,
            "totalSales": round(motorcycle.total_sales or 0.0, 2),
        })
    return results


def monthly_sales_series(
    months: int,
    metric: Metric = "units",
    today: date | None = None,
) -> list[TimePoint]:
    """
    One TimePoint per calendar month, ending with the current month.

    Args:
        months: Number of months to return (> 0)
        metric: "units" counts sales, "revenue" sums sale prices
        today: Anchor date, defaults to today's local date

    Months without sales are reported as 0.
    """
    if months <= 0:
        raise InvalidInputError(f"Month count must be positive, got {months}")
    if metric not in ("units", "revenue"):
        raise InvalidInputError(f"Unknown metric '{metric}'")

    anchor = (today or timezone.localdate()).replace(day=1)
    start = add_months(anchor, -(months - 1))
    end = add_months(anchor, 1)
    month_starts = pd.date_range(start=start, periods=months, freq="MS")

    rows = (
        Sale.objects
        .filter(sale_date__date__gte=start, sale_date__date__lt=end)
        .exclude(status=Sale.Status.CANCELLED)
        .values_list('sale_date', 'sale_price')
    )
    frame = pd.DataFrame(list(rows), columns=["sale_date", "sale_price"])

    if frame.empty:
        logger.info(f"No sales recorded between {start} and {end}")
        totals = pd.Series(0.0, index=month_starts)
    else:
        stamps = pd.to_datetime(frame["sale_date"], utc=True).dt.tz_convert(None)
        frame["month"] = stamps.dt.to_period("M").dt.to_timestamp()
        grouped = frame.groupby("month")["sale_price"]
        totals = grouped.count() if metric == "units" else grouped.sum()
        totals = totals.reindex(month_starts, fill_value=0)

    return [
        TimePoint(date=stamp.date().isoformat(), value=round(float(value), 2))
        for stamp, value in totals.items()
    ]
