"""Narrative insights for the dashboard's insights view.

Each insight pairs a short headline with a sentence built from the derived
tables. An insight is left out when the data it depends on is empty.
"""

import math
from dataclasses import dataclass

from .transforms.metrics_transforms import holiday_lift, top_stores


@dataclass(frozen=True)
class Insight:
    title: str
    detail: str
    value: float


def _holiday_insight(tables):
    lift = holiday_lift(tables.holiday_impact)
    if not math.isfinite(lift):
        return None
    direction = "higher" if lift >= 0 else "lower"
    return Insight(
        "Holiday Sales Boost",
        f"Holiday weeks generate {abs(lift):.1f}% {direction} average sales than non-holiday weeks.",
        lift,
    )


def _store_spread_insight(summary, tables, top_n):
    top = top_stores(tables.store_performance, top_n)
    if top.empty or not summary.store_count or not summary.total_sales:
        return None
    average_store_total = summary.total_sales / summary.store_count
    ratio = float(top['total_sales'].mean()) / average_store_total
    return Insight(
        "Store Performance Variation",
        f"The top {len(top)} stores average {ratio:.2f}x the total sales of an average store.",
        ratio,
    )


def _temperature_insight(tables):
    table = tables.temperature_correlation
    if table.empty:
        return None
    best = table.loc[table['avg_sales'].astype(float).idxmax()]
    return Insight(
        "Temperature Sweet Spot",
        f"Average weekly sales peak in the {best['label']} range.",
        float(best['avg_sales']),
    )


def _fuel_price_insight(tables):
    table = tables.fuel_price_correlation
    if table.empty:
        return None
    best = table.loc[table['avg_sales'].astype(float).idxmax()]
    return Insight(
        "Fuel Price Sensitivity",
        f"Average weekly sales peak when fuel costs ${best['fuel_price']:.2f} per gallon.",
        float(best['avg_sales']),
    )


def build_insights(summary, tables, top_n=10):
    candidates = [
        _holiday_insight(tables),
        _store_spread_insight(summary, tables, top_n),
        _temperature_insight(tables),
        _fuel_price_insight(tables),
    ]
    return [insight for insight in candidates if insight is not None]
