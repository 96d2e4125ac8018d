"""
Module for generating sleep insights, recommendations and tips from a night's
duration, restlessness and historical averages.
"""

from dreamtrack.core.models.output_models import SleepTip
from dreamtrack.utils.constants import (
    insight_thresholds,
    insight_messages,
    recommendation_thresholds,
    recommendation_messages,
    sleep_tips,
    tip_score_bands,
)


def _section(config, name, defaults, default_messages):
    """Merge a config section over its defaults, messages included"""
    section = dict((config or {}).get(name, {}))
    messages = {**default_messages, **section.pop('messages', {})}
    return {**defaults, **section}, messages


def generate_insights(duration, restlessness, averages, config=None):
    """
    Generate insights comparing a night with the historical averages.

    Args:
        duration: Hours slept
        restlessness: Restlessness rating
        averages: Dict with avg_duration and avg_restlessness, or None without history
        config: Optional configuration dictionary with an 'insights' section

    Returns:
        list: Insight messages, at most two, in a fixed order
    """
    insights = []
    if not averages:
        return insights

    thresholds, messages = _section(config, 'insights', insight_thresholds, insight_messages)

    if duration < averages['avg_duration'] * thresholds['duration_ratio']:
        insights.append(messages['below_average_duration'])
    if restlessness > averages['avg_restlessness'] * thresholds['restlessness_ratio']:
        insights.append(messages['more_restless'])

    return insights


def generate_recommendations(duration, restlessness, config=None):
    """
    Generate recommendations from fixed threshold rules.

    Args:
        duration: Hours slept
        restlessness: Restlessness rating
        config: Optional configuration dictionary with a 'recommendations' section

    Returns:
        list: Recommendation messages, at most three, in a fixed order
    """
    thresholds, messages = _section(
        config, 'recommendations', recommendation_thresholds, recommendation_messages
    )
    recommendations = []

    if duration < thresholds['min_duration_hours']:
        recommendations.append(messages['short_sleep'])
    if restlessness > thresholds['max_restlessness']:
        recommendations.append(messages['restless_sleep'])
    if duration > thresholds['max_duration_hours']:
        recommendations.append(messages['long_sleep'])

    return recommendations


def _tip_category(score, bands):
    if score < bands['poor_below']:
        return 'poor'
    if score < bands['average_below']:
        return 'average'
    return 'good'


def get_sleep_tips(score, config=None):
    """Return the tips for the band a sleep score falls in"""
    bands = {**tip_score_bands, **(config or {}).get('tips', {})}
    return [SleepTip(**tip) for tip in sleep_tips[_tip_category(score, bands)]]
