import logging
import math

import numpy as np

from ..state import EnvironmentalRanges, SummaryMetrics
from .utils import count_stores, safe_mean


def summary_metrics(records):
    """Scalar rollups shown on the overview cards."""
    sales = records['weekly_sales']
    summary = SummaryMetrics(
        total_sales=float(sales.sum()) if len(sales) else 0.0,
        avg_weekly_sales=safe_mean(sales),
        store_count=count_stores(records['store_number']),
        record_count=int(len(records)),
    )
    logging.info(f"Summary metrics: {summary}")
    return summary


def holiday_lift(holiday_table):
    """Percent by which holiday-week mean sales exceed non-holiday mean sales.

    NaN when either row is missing or the non-holiday mean is zero.
    """
    is_holiday = holiday_table['is_holiday'].astype(bool)
    holiday = holiday_table.loc[is_holiday, 'avg_sales']
    non_holiday = holiday_table.loc[~is_holiday, 'avg_sales']
    if holiday.empty or non_holiday.empty:
        return math.nan

    baseline = float(non_holiday.iloc[0])
    if baseline == 0:
        return math.nan
    return (float(holiday.iloc[0]) / baseline - 1) * 100


def top_stores(performance_table, n=10):
    return performance_table.head(n).reset_index(drop=True)


def _finite_range(values):
    finite = values[np.isfinite(values)]
    if finite.empty:
        return 0.0, 0.0
    return float(finite.min()), float(finite.max())


def environmental_ranges(records):
    """Observed span of temperature, fuel price and unemployment.

    Non-finite readings are ignored. A column without any finite reading
    reports 0.0 for both ends.
    """
    temperature = _finite_range(records['temperature'].astype(float))
    fuel_price = _finite_range(records['fuel_price'].astype(float))
    unemployment = _finite_range(records['unemployment'].astype(float))
    ranges = EnvironmentalRanges(
        temperature_min=temperature[0],
        temperature_max=temperature[1],
        fuel_price_min=fuel_price[0],
        fuel_price_max=fuel_price[1],
        unemployment_min=unemployment[0],
        unemployment_max=unemployment[1],
    )
    logging.info(f"Environmental ranges: {ranges}")
    return ranges
