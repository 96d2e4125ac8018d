"""
Analysis module for sleep data insights.

This module contains functions and classes for evaluating a night of sleep
and computing the metrics behind the dashboard.
"""

from dreamtrack.core.analysis.sleep_analysis import SleepAnalyzer, analyze_sleep
from dreamtrack.core.analysis.sleep_metrics import calculate_dashboard_metrics, calculate_historical_averages

__all__ = ['SleepAnalyzer', 'analyze_sleep', 'calculate_dashboard_metrics', 'calculate_historical_averages']
