"""Aggregations feeding the dashboard charts.

Each function takes the filtered sales records and recomputes one derived
table from scratch. Row order is part of the result: charts draw their
axes in the order given here.
"""

import logging

import numpy as np
import pandas as pd

from ..config import PipelineConfig
from ..schemas import (
    MONTH_NAMES,
    INVALID_PERIOD,
    HOLIDAY_WEEKS,
    NON_HOLIDAY_WEEKS,
    MONTHLY_TREND_COLUMNS,
    STORE_PERFORMANCE_COLUMNS,
    HOLIDAY_IMPACT_COLUMNS,
    TEMPERATURE_COLUMNS,
    FUEL_PRICE_COLUMNS,
)
from ..state import DashboardTables
from .utils import count_stores, safe_mean

_MONTH_ORDER = {name: i for i, name in enumerate(MONTH_NAMES)}


def _period_label(year, month):
    if pd.isna(year) or pd.isna(month):
        return INVALID_PERIOD
    return f"{year}-{month}"


def monthly_trend(records):
    """Summed and mean sales per (year, month), in calendar order."""
    if records.empty:
        return pd.DataFrame(columns=MONTHLY_TREND_COLUMNS)

    trend = (
        records.groupby(['year', 'month'], dropna=False, sort=False)
        .agg(
            total_sales=('weekly_sales', 'sum'),
            avg_sales=('weekly_sales', 'mean'),
            store_count=('store_number', count_stores),
        )
        .reset_index()
    )
    trend['month_order'] = trend['month'].map(_MONTH_ORDER)
    # periods without a month name sort last within their year
    trend = trend.sort_values(['year', 'month_order'], na_position='last')
    trend['period'] = [_period_label(y, m) for y, m in zip(trend['year'], trend['month'])]
    return trend[MONTHLY_TREND_COLUMNS].reset_index(drop=True)


def store_performance(records):
    """Total and mean sales per store, best store first."""
    if records.empty:
        return pd.DataFrame(columns=STORE_PERFORMANCE_COLUMNS)

    performance = (
        records.groupby('store_number', dropna=False)
        .agg(
            total_sales=('weekly_sales', 'sum'),
            avg_sales=('weekly_sales', 'mean'),
            weeks=('weekly_sales', 'size'),
        )
        .reset_index()
        .rename(columns={'store_number': 'store'})
        .sort_values('total_sales', ascending=False, kind='mergesort')
    )
    return performance[STORE_PERFORMANCE_COLUMNS].reset_index(drop=True)


def holiday_impact(records):
    """Mean sales for holiday and non-holiday weeks, always two rows."""
    rows = []
    for name, is_holiday in ((HOLIDAY_WEEKS, True), (NON_HOLIDAY_WEEKS, False)):
        in_group = records['holiday_flag'].eq(is_holiday).fillna(False).astype(bool)
        sales = records.loc[in_group, 'weekly_sales']
        rows.append({
            'name': name,
            'is_holiday': is_holiday,
            'avg_sales': safe_mean(sales),
            'count': int(len(sales)),
        })
    return pd.DataFrame(rows, columns=HOLIDAY_IMPACT_COLUMNS)


def _bucketed_means(records, buckets):
    return (
        records.assign(bucket=buckets)
        .groupby('bucket')
        .agg(avg_sales=('weekly_sales', 'mean'), count=('weekly_sales', 'size'))
        .reset_index()
        .sort_values('bucket')
        .reset_index(drop=True)
    )


def temperature_correlation(records, width=10):
    """Mean sales per temperature band of `width` degrees F."""
    valid = records[np.isfinite(records['temperature'])]
    if valid.empty:
        return pd.DataFrame(columns=TEMPERATURE_COLUMNS)

    buckets = np.floor(valid['temperature'] / width) * width
    table = _bucketed_means(valid, buckets)
    table['label'] = [f"{b:g}-{b + width:g}°F" for b in table['bucket']]
    return table[TEMPERATURE_COLUMNS]


def fuel_price_correlation(records, steps_per_dollar=4):
    """Mean sales per fuel price step (quarter dollar by default)."""
    valid = records[np.isfinite(records['fuel_price'])]
    if valid.empty:
        return pd.DataFrame(columns=FUEL_PRICE_COLUMNS)

    buckets = np.floor(valid['fuel_price'] * steps_per_dollar) / steps_per_dollar
    table = _bucketed_means(valid, buckets)
    return table.rename(columns={'bucket': 'fuel_price'})[FUEL_PRICE_COLUMNS]


def build_tables(records, config=None):
    """Recompute every derived table from the filtered records."""
    config = config or PipelineConfig()
    tables = DashboardTables(
        monthly_trend=monthly_trend(records),
        store_performance=store_performance(records),
        holiday_impact=holiday_impact(records),
        temperature_correlation=temperature_correlation(records, config.temperature_bucket_width),
        fuel_price_correlation=fuel_price_correlation(records, config.fuel_price_steps_per_dollar),
    )
    logging.info(
        f"Built tables: {len(tables.monthly_trend)} periods, "
        f"{len(tables.store_performance)} stores, "
        f"{len(tables.temperature_correlation)} temperature bands, "
        f"{len(tables.fuel_price_correlation)} fuel price steps"
    )
    return tables
