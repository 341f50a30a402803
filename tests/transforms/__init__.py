"""
Tests for pipeline transformation components.
Includes tests for fetching, parsing, filtering, aggregation and summary metrics.
"""

from pathlib import Path

# Define transforms test directory
TRANSFORMS_TEST_DIR = Path(__file__).parent
