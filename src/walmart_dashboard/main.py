import logging

from walmart_dashboard.config import PipelineConfig
from walmart_dashboard.insights import build_insights
from walmart_dashboard.state import DashboardState
from walmart_dashboard.transforms import (
    DatasetLoadError,
    fetch_csv_text,
    parse_csv_text,
    to_sales_records,
    filter_valid_sales,
    build_tables,
    summary_metrics,
    environmental_ranges,
)


def configure_logging(level="INFO"):
    logging.getLogger().setLevel(getattr(logging, str(level).upper(), logging.INFO))


def run_pipeline(config=None):

    """
    Loads the Walmart sales snapshot and prepares everything the dashboard renders.

    The pipeline performs the following operations:
    1. Fetches the CSV from a local path or GCS
    2. Parses raw rows and coerces them to typed sales records
    3. Drops records without positive, finite weekly sales
    4. Computes the derived tables, summary metrics and insights
    5. Returns the dashboard state, either ready or failed
    """

    config = config or PipelineConfig()
    configure_logging(config.log_level)

    state = DashboardState()
    state.start_loading()

    # Stage 1: Data Ingestion
    try:
        text = fetch_csv_text(config.input_csv)
        raw_rows = parse_csv_text(text, config.delimiters)
    except DatasetLoadError as e:
        logging.error(f"Failed to load sales data from {config.input_csv}: {e}")
        state.mark_failed(e)
        return state

    # Stage 2: Data Cleaning
    records = to_sales_records(raw_rows, cpi_column=config.cpi_column)
    clean = filter_valid_sales(records, drop_invalid_dates=config.drop_invalid_dates)

    # Stage 3: Aggregation
    tables = build_tables(clean, config)
    summary = summary_metrics(clean)
    ranges = environmental_ranges(clean)
    insights = build_insights(summary, tables, top_n=config.top_stores)

    state.mark_ready(clean, tables, summary, insights, ranges)
    logging.info(f"Dashboard ready with {summary.record_count} records from {summary.store_count} stores")
    return state
