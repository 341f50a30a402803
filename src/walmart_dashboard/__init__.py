"""Data pipeline behind the Walmart sales analytics dashboard."""

from .config import PipelineConfig
from .state import (
    DashboardState,
    DashboardTables,
    EnvironmentalRanges,
    LoadState,
    SummaryMetrics,
    InvalidTransitionError,
)
from .main import run_pipeline

__all__ = [
    'PipelineConfig',
    'DashboardState',
    'DashboardTables',
    'LoadState',
    'SummaryMetrics',
    'EnvironmentalRanges',
    'InvalidTransitionError',
    'run_pipeline',
]
