import pytest

from walmart_dashboard.schemas import MONTHLY_TREND_COLUMNS, HOLIDAY_IMPACT_COLUMNS
from walmart_dashboard.state import (
    DashboardState,
    DashboardTables,
    EnvironmentalRanges,
    InvalidTransitionError,
    LoadState,
    SummaryMetrics,
)
from walmart_dashboard.transforms import build_tables, summary_metrics


def test_initial_state_is_empty():
    state = DashboardState()

    assert state.state is LoadState.IDLE
    assert not state.is_ready
    assert state.summary == SummaryMetrics()
    assert state.ranges == EnvironmentalRanges()
    assert state.tables.monthly_trend.empty
    assert list(state.tables.monthly_trend.columns) == MONTHLY_TREND_COLUMNS
    assert list(state.tables.holiday_impact.columns) == HOLIDAY_IMPACT_COLUMNS
    assert state.error is None


def test_ready_transition(sample_records):
    state = DashboardState()
    state.start_loading()
    assert state.state is LoadState.LOADING

    tables = build_tables(sample_records)
    ranges = EnvironmentalRanges(temperature_min=38.49, temperature_max=51.1)
    state.mark_ready(sample_records, tables, summary_metrics(sample_records), ranges=ranges)

    assert state.is_ready
    assert state.tables is tables
    assert state.summary.record_count == 6
    assert state.ranges is ranges


def test_failed_transition():
    state = DashboardState()
    state.start_loading()
    state.mark_failed(RuntimeError("boom"))

    assert state.state is LoadState.FAILED
    assert state.error == "boom"
    assert state.tables.store_performance.empty


@pytest.mark.parametrize("action", [
    lambda s: s.mark_failed("too early"),
    lambda s: s.mark_ready(None, DashboardTables(), SummaryMetrics()),
])
def test_cannot_finish_before_loading(action):
    with pytest.raises(InvalidTransitionError):
        action(DashboardState())


def test_cannot_load_twice():
    state = DashboardState()
    state.start_loading()
    state.mark_failed("unreachable")

    with pytest.raises(InvalidTransitionError):
        state.start_loading()


def test_as_records_rounds(scenario_records):
    records = build_tables(scenario_records).as_records(decimals=1)

    assert set(records) == {
        "monthly_trend",
        "store_performance",
        "holiday_impact",
        "temperature_correlation",
        "fuel_price_correlation",
    }
    assert records["holiday_impact"][1]["avg_sales"] == 1500.5
    assert records["store_performance"][0]["avg_sales"] == pytest.approx(1750.2)
    assert records["monthly_trend"][0]["period"] == "2012-January"


def test_as_records_empty_tables():
    assert DashboardTables().as_records() == {
        "monthly_trend": [],
        "store_performance": [],
        "holiday_impact": [],
        "temperature_correlation": [],
        "fuel_price_correlation": [],
    }
