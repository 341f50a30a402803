import sys
from pathlib import Path

import pytest

# Get absolute paths
root_dir = Path(__file__).parent.parent
src_dir = root_dir / "src"

# Add src to sys.path so tests run from a plain checkout
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from walmart_dashboard.transforms import (  # noqa: E402
    parse_csv_text,
    to_sales_records,
    filter_valid_sales,
)

from tests import SAMPLE_CSV  # noqa: E402


SCENARIO_CSV = (
    "Store_Number,Date,Weekly_Sales,Holiday_Flag,Temperature,Fuel_Price, CPI ,Unemployment\n"
    '1,1/1/2012,"1,500.50",0,50,3.00,211,8.1\n'
    '1,12/25/2012,"2,000",1,55,3.10,211,8.1\n'
    "2,2/1/2012,abc,0,60,3.20,211,8.1\n"
)


def load_records(text):
    """Parse, coerce and filter CSV text the way the pipeline does."""
    return filter_valid_sales(to_sales_records(parse_csv_text(text)))


@pytest.fixture
def scenario_csv():
    return SCENARIO_CSV


@pytest.fixture
def scenario_records():
    return load_records(SCENARIO_CSV)


@pytest.fixture
def sample_csv_path():
    return SAMPLE_CSV


@pytest.fixture
def sample_records():
    return load_records(SAMPLE_CSV.read_text())


@pytest.fixture
def records_from_text():
    return load_records
