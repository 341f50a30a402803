"""
Test suite for the Walmart dashboard pipeline.
Contains unit tests and integration tests for data processing pipeline components.
"""

from pathlib import Path

# Define test directory root
TEST_DIR = Path(__file__).parent

# Define paths to test resources
TEST_RESOURCES_DIR = TEST_DIR / "resources"
TEST_DATA_DIR = TEST_RESOURCES_DIR / "data"
SAMPLE_CSV = TEST_DATA_DIR / "walmart_sample.csv"
