"""Schema definitions for the Walmart dashboard pipeline.

This module provides the raw CSV column names, the typed record columns and
the column layout of every derived table handed to the dashboard views.

Exports:
    RAW_COLUMNS: Column names expected in the sales CSV header
    RECORD_COLUMNS: Columns of the typed sales record frame
    MONTH_NAMES: Calendar-ordered English month names
    MONTHLY_TREND_COLUMNS, STORE_PERFORMANCE_COLUMNS, HOLIDAY_IMPACT_COLUMNS,
    TEMPERATURE_COLUMNS, FUEL_PRICE_COLUMNS: Derived table layouts
"""

STORE_NUMBER = 'Store_Number'
DATE = 'Date'
WEEKLY_SALES = 'Weekly_Sales'
HOLIDAY_FLAG = 'Holiday_Flag'
TEMPERATURE = 'Temperature'
FUEL_PRICE = 'Fuel_Price'
CPI = ' CPI '  # header is padded in the source file
UNEMPLOYMENT = 'Unemployment'

RAW_COLUMNS = [
    STORE_NUMBER,
    DATE,
    WEEKLY_SALES,
    HOLIDAY_FLAG,
    TEMPERATURE,
    FUEL_PRICE,
    CPI,
    UNEMPLOYMENT
]

RECORD_COLUMNS = [
    'store_number',
    'date',
    'year',
    'month',
    'weekly_sales',
    'holiday_flag',
    'temperature',
    'fuel_price',
    'cpi',
    'unemployment'
]

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]

INVALID_PERIOD = 'Invalid Date'
HOLIDAY_WEEKS = 'Holiday Weeks'
NON_HOLIDAY_WEEKS = 'Non-Holiday Weeks'

MONTHLY_TREND_COLUMNS = ['period', 'year', 'month', 'total_sales', 'avg_sales', 'store_count']
STORE_PERFORMANCE_COLUMNS = ['store', 'total_sales', 'avg_sales', 'weeks']
HOLIDAY_IMPACT_COLUMNS = ['name', 'is_holiday', 'avg_sales', 'count']
TEMPERATURE_COLUMNS = ['bucket', 'label', 'avg_sales', 'count']
FUEL_PRICE_COLUMNS = ['fuel_price', 'avg_sales', 'count']
