"""
Recommendation module for sleep insights.

This module contains functions for generating insights, recommendations
and sleep tips from a night's metrics.
"""

from dreamtrack.core.recommendation.recommendation_generator import (
    generate_insights,
    generate_recommendations,
    get_sleep_tips,
)

__all__ = ['generate_insights', 'generate_recommendations', 'get_sleep_tips']
