import pytest

from walmart_dashboard.insights import Insight, build_insights
from walmart_dashboard.state import DashboardTables, SummaryMetrics
from walmart_dashboard.transforms import build_tables, summary_metrics


def test_build_insights(sample_records):
    tables = build_tables(sample_records)
    insights = build_insights(summary_metrics(sample_records), tables, top_n=1)

    titles = [insight.title for insight in insights]
    assert titles == [
        "Holiday Sales Boost",
        "Store Performance Variation",
        "Temperature Sweet Spot",
        "Fuel Price Sensitivity",
    ]
    holiday, spread, temperature, fuel = insights
    assert holiday.value == pytest.approx((1889883.47 / 1449277.315 - 1) * 100)
    assert "higher" in holiday.detail
    assert spread.value == pytest.approx(4840455.02 / (9576876.20 / 3))
    assert "30-40°F" in temperature.detail
    assert "$2.50" in fuel.detail


def test_holiday_insight_reports_drop(records_from_text):
    records = records_from_text("Store_Number,Weekly_Sales,Holiday_Flag\n1,50,1\n1,100,0\n")
    insights = build_insights(summary_metrics(records), build_tables(records))

    assert insights[0] == Insight(
        "Holiday Sales Boost",
        "Holiday weeks generate 50.0% lower average sales than non-holiday weeks.",
        -50.0,
    )


def test_no_insights_without_data():
    assert build_insights(SummaryMetrics(), DashboardTables()) == []
