"""Load state of the dashboard and the data handed to its views.

The dashboard moves through ``idle -> loading -> ready | failed`` exactly
once per load. Until it is ready every table is an empty frame carrying its
declared columns and the summary is zero-valued, so views can render
without special-casing a missing dataset.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import pandas as pd

from .schemas import (
    RECORD_COLUMNS,
    MONTHLY_TREND_COLUMNS,
    STORE_PERFORMANCE_COLUMNS,
    HOLIDAY_IMPACT_COLUMNS,
    TEMPERATURE_COLUMNS,
    FUEL_PRICE_COLUMNS,
)


class LoadState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class InvalidTransitionError(RuntimeError):
    """Raised when a load state change is requested from the wrong state."""


def _empty_frame(columns):
    return lambda: pd.DataFrame(columns=columns)


@dataclass(frozen=True)
class SummaryMetrics:
    total_sales: float = 0.0
    avg_weekly_sales: float = 0.0
    store_count: int = 0
    record_count: int = 0


@dataclass(frozen=True)
class EnvironmentalRanges:
    temperature_min: float = 0.0
    temperature_max: float = 0.0
    fuel_price_min: float = 0.0
    fuel_price_max: float = 0.0
    unemployment_min: float = 0.0
    unemployment_max: float = 0.0


@dataclass
class DashboardTables:
    monthly_trend: pd.DataFrame = field(default_factory=_empty_frame(MONTHLY_TREND_COLUMNS))
    store_performance: pd.DataFrame = field(default_factory=_empty_frame(STORE_PERFORMANCE_COLUMNS))
    holiday_impact: pd.DataFrame = field(default_factory=_empty_frame(HOLIDAY_IMPACT_COLUMNS))
    temperature_correlation: pd.DataFrame = field(default_factory=_empty_frame(TEMPERATURE_COLUMNS))
    fuel_price_correlation: pd.DataFrame = field(default_factory=_empty_frame(FUEL_PRICE_COLUMNS))

    def as_records(self, decimals=None):
        """Plain list-of-dict rows per table, optionally rounded for display."""
        tables = {
            'monthly_trend': self.monthly_trend,
            'store_performance': self.store_performance,
            'holiday_impact': self.holiday_impact,
            'temperature_correlation': self.temperature_correlation,
            'fuel_price_correlation': self.fuel_price_correlation,
        }
        if decimals is not None:
            tables = {name: table.round(decimals) for name, table in tables.items()}
        return {name: table.to_dict('records') for name, table in tables.items()}


@dataclass
class DashboardState:
    state: LoadState = LoadState.IDLE
    records: pd.DataFrame = field(default_factory=_empty_frame(RECORD_COLUMNS))
    tables: DashboardTables = field(default_factory=DashboardTables)
    summary: SummaryMetrics = field(default_factory=SummaryMetrics)
    ranges: EnvironmentalRanges = field(default_factory=EnvironmentalRanges)
    insights: List = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_ready(self):
        return self.state is LoadState.READY

    def _require(self, expected):
        if self.state is not expected:
            raise InvalidTransitionError(
                f"Cannot leave state {self.state.value!r}, expected {expected.value!r}"
            )

    def start_loading(self):
        self._require(LoadState.IDLE)
        self.state = LoadState.LOADING

    def mark_ready(self, records, tables, summary, insights=(), ranges=None):
        self._require(LoadState.LOADING)
        self.records = records
        self.tables = tables
        self.summary = summary
        self.ranges = ranges or EnvironmentalRanges()
        self.insights = list(insights)
        self.state = LoadState.READY

    def mark_failed(self, error):
        self._require(LoadState.LOADING)
        self.error = str(error)
        self.state = LoadState.FAILED
