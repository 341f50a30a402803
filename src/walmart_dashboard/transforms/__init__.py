from .io_transforms import DatasetLoadError, fetch_csv_text
from .parse_transforms import (
    detect_delimiter,
    parse_csv_text,
    coerce_float,
    coerce_sales,
    coerce_int,
    coerce_flag,
    coerce_date,
    month_name,
    to_sales_records,
)
from .filter_transforms import filter_valid_sales
from .sales_transforms import (
    monthly_trend,
    store_performance,
    holiday_impact,
    temperature_correlation,
    fuel_price_correlation,
    build_tables,
)
from .metrics_transforms import summary_metrics, holiday_lift, top_stores, environmental_ranges
from .utils import safe_mean, count_stores

"""
Transform module for Walmart dashboard data processing.

This module provides the data preparation steps behind the dashboard:
- Fetching the sales CSV from local disk or Google Cloud Storage
- Parsing and coercing raw rows into typed sales records
- Filtering out records without usable sales figures
- Aggregations for the monthly, store, holiday and environmental views
- Summary metrics for the overview cards and environmental ranges
"""

__all__ = [
    "DatasetLoadError",
    "fetch_csv_text",
    "detect_delimiter",
    "parse_csv_text",
    "coerce_float",
    "coerce_sales",
    "coerce_int",
    "coerce_flag",
    "coerce_date",
    "month_name",
    "to_sales_records",
    "filter_valid_sales",
    "monthly_trend",
    "store_performance",
    "holiday_impact",
    "temperature_correlation",
    "fuel_price_correlation",
    "build_tables",
    "summary_metrics",
    "holiday_lift",
    "top_stores",
    "environmental_ranges",
    "count_stores",
    "safe_mean",
]
