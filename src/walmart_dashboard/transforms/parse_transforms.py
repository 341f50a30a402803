import csv
import logging
import re
from io import StringIO

import numpy as np
import pandas as pd

from ..schemas import MONTH_NAMES
from ..schemas.schemas import (
    STORE_NUMBER,
    DATE,
    WEEKLY_SALES,
    HOLIDAY_FLAG,
    TEMPERATURE,
    FUEL_PRICE,
    CPI,
    UNEMPLOYMENT,
)
from .io_transforms import DatasetLoadError

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_INT64_LIMIT = 2 ** 63


def detect_delimiter(text, delimiters=",\t|;", sample_lines=20):
    """Guess which of the candidate delimiters separates fields in the CSV text.

    Falls back to a comma when the sample is ambiguous, e.g. a single column.
    """
    sample = "\n".join([line for line in text.splitlines() if line.strip()][:sample_lines])
    try:
        delimiter = csv.Sniffer().sniff(sample, delimiters=delimiters).delimiter
    except csv.Error as e:
        logging.warning(f"Could not detect delimiter ({e}), defaulting to ','")
        return ","
    logging.info(f"Detected delimiter {delimiter!r}")
    return delimiter


def _skip_bad_line(fields):
    logging.warning(f"Skipping malformed line with {len(fields)} fields: {fields}")
    return None


def parse_csv_text(text, delimiters=",\t|;"):
    """Parse raw CSV text into a frame of raw rows.

    Every field is kept as the string found in the file and header names are
    kept verbatim, so the padded ' CPI ' column survives. Blank lines are
    skipped. Lines with too many fields are logged and dropped.
    """
    if not text or not text.strip():
        raise DatasetLoadError("Sales data is empty")

    delimiter = detect_delimiter(text, delimiters)
    try:
        raw_rows = pd.read_csv(
            StringIO(text),
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_skip_bad_line,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, csv.Error) as e:
        logging.error(f"Error parsing sales data: {e}")
        raise DatasetLoadError(f"Could not parse sales data: {e}") from e

    logging.info(f"Parsed {len(raw_rows)} raw rows with columns {list(raw_rows.columns)}")
    return raw_rows.fillna("")


def coerce_float(values):
    """Numeric coercion of a string Series, unparseable values become NaN"""
    return pd.to_numeric(values.astype(str).str.strip(), errors="coerce").astype(float)


def coerce_sales(values):
    """Strip thousands separators before numeric coercion"""
    return coerce_float(values.astype(str).str.replace(",", "", regex=False))


def coerce_int(values):
    """Integer coercion truncating toward zero.

    Non-finite values and values outside the int64 range become NA.
    """
    floats = coerce_float(values)
    floats = floats.where(np.isfinite(floats) & (floats.abs() < _INT64_LIMIT))
    return np.trunc(floats).astype("Int64")


def coerce_flag(values):
    """1 is a holiday week, 0 is not, anything else is unknown (NA)"""
    flags = coerce_int(values)
    return flags.eq(1).where(flags.isin([0, 1])).astype("boolean")


def _parse_int(text):
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def month_name(month_number):
    if month_number is None or not 1 <= month_number <= 12:
        return None
    return MONTH_NAMES[month_number - 1]


def coerce_date(value):
    """Decompose a month/day/year string into (date, year, month name).

    A value without exactly three '/'-separated parts, or one naming a
    day that does not exist (e.g. '13/1/2012'), yields NaT and no month
    name. The year is still read from the third part when it is present.
    """
    parts = str(value).strip().split("/")
    if len(parts) != 3:
        return pd.NaT, None, None

    month, day, year = (_parse_int(part) for part in parts)
    if year is not None and not -_INT64_LIMIT < year < _INT64_LIMIT:
        year = None
    if month is None or day is None or year is None:
        return pd.NaT, year, None
    try:
        date = pd.Timestamp(year=year, month=month, day=day)
    except (ValueError, OverflowError, TypeError) as e:
        logging.debug(f"Invalid date '{value}': {e}")
        return pd.NaT, year, None
    return date, year, month_name(date.month)


def to_sales_records(raw_rows, cpi_column=CPI):
    """Map raw CSV rows to typed sales records.

    No row is rejected here. Fields that fail coercion carry NaN/NA/NaT
    so the sales filter can decide what to keep.
    """
    index = raw_rows.index

    def column(name):
        if name in raw_rows.columns:
            return raw_rows[name].fillna("").astype(str)
        logging.warning(f"Column {name!r} missing from sales data")
        return pd.Series("", index=index, dtype=object)

    parsed_dates = [coerce_date(value) for value in column(DATE)]

    records = pd.DataFrame({
        'store_number': coerce_int(column(STORE_NUMBER)),
        'date': pd.Series([d[0] for d in parsed_dates], index=index, dtype="datetime64[ns]"),
        'year': pd.Series([d[1] for d in parsed_dates], index=index, dtype="Int64"),
        'month': pd.Series([d[2] for d in parsed_dates], index=index, dtype=object),
        'weekly_sales': coerce_sales(column(WEEKLY_SALES)),
        'holiday_flag': coerce_flag(column(HOLIDAY_FLAG)),
        'temperature': coerce_float(column(TEMPERATURE)),
        'fuel_price': coerce_float(column(FUEL_PRICE)),
        'cpi': coerce_int(column(cpi_column)),
        'unemployment': coerce_float(column(UNEMPLOYMENT)),
    }, index=index)

    invalid_dates = int(records['date'].isna().sum())
    if invalid_dates:
        logging.warning(f"{invalid_dates} rows have an invalid date")
    return records
