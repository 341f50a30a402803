"""Public exports for Walmart dashboard schema definitions."""

from .schemas import (
    RAW_COLUMNS,
    RECORD_COLUMNS,
    MONTH_NAMES,
    INVALID_PERIOD,
    HOLIDAY_WEEKS,
    NON_HOLIDAY_WEEKS,
    MONTHLY_TREND_COLUMNS,
    STORE_PERFORMANCE_COLUMNS,
    HOLIDAY_IMPACT_COLUMNS,
    TEMPERATURE_COLUMNS,
    FUEL_PRICE_COLUMNS
)

__all__ = [
    'RAW_COLUMNS',
    'RECORD_COLUMNS',
    'MONTH_NAMES',
    'INVALID_PERIOD',
    'HOLIDAY_WEEKS',
    'NON_HOLIDAY_WEEKS',
    'MONTHLY_TREND_COLUMNS',
    'STORE_PERFORMANCE_COLUMNS',
    'HOLIDAY_IMPACT_COLUMNS',
    'TEMPERATURE_COLUMNS',
    'FUEL_PRICE_COLUMNS'
]
