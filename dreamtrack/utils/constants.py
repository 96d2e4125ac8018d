"""
Constants used throughout the DreamTrack sleep insights app.
This includes scoring thresholds, message texts, the sleep tips table and other defaults.
"""

# Score arithmetic
scoring_defaults = {
    'restlessness_weight': 10,    # Points removed from the base score per restlessness step
    'duration_floor_hours': 4.0,  # Duration at or below which the duration score is 0
    'duration_slope': 20,         # Duration score points per hour above the floor
    'min_score': 0,
    'max_score': 100,
}

# Quality band thresholds, evaluated in order Poor -> Average -> Good
quality_band_thresholds = {
    'poor_duration_below': 6.0,
    'poor_restlessness_above': 7,
    'average_duration_below': 7.0,
    'average_restlessness_above': 4,
}

# Ratios against the historical averages
insight_thresholds = {
    'duration_ratio': 0.9,
    'restlessness_ratio': 1.2,
}

recommendation_thresholds = {
    'min_duration_hours': 7.0,
    'max_restlessness': 5,
    'max_duration_hours': 9.0,
}

insight_messages = {
    'below_average_duration': 'Your sleep duration is below your average',
    'more_restless': 'You were more restless than usual',
}

recommendation_messages = {
    'short_sleep': 'Try to get at least 7 hours of sleep',
    'restless_sleep': 'Consider reducing caffeine intake in the evening',
    'long_sleep': 'Longer sleep duration might indicate underlying fatigue',
}

# Default values for the application state and history handling
default_values = {
    'history_window': 7,          # Number of recent records kept for averaging and the dashboard
    'initial_sleep_score': 85,
    'initial_last_night_sleep': 7.5,
    'max_restlessness': 10,
}

# Score boundaries for the tips table
tip_score_bands = {
    'poor_below': 60,
    'average_below': 80,
}

tip_icons = [
    'moon', 'sun', 'coffee', 'exercise', 'meditation',
    'book', 'phone', 'bed', 'alarm', 'food'
]

sleep_tips = {
    'poor': [
        {
            'title': 'Establish a Consistent Schedule',
            'description': 'Go to bed and wake up at the same time every day, even on weekends, to regulate your body clock.',
            'icon': 'alarm'
        },
        {
            'title': 'Create a Relaxing Bedtime Routine',
            'description': "Take a warm bath, read a book, or practice gentle stretching before bed to signal your body it's time to sleep.",
            'icon': 'book'
        },
        {
            'title': 'Limit Screen Time',
            'description': 'Avoid electronic devices at least 1 hour before bedtime as blue light can interfere with melatonin production.',
            'icon': 'phone'
        },
        {
            'title': 'Optimize Your Sleep Environment',
            'description': 'Keep your bedroom cool, dark, and quiet. Consider using blackout curtains and white noise.',
            'icon': 'bed'
        }
    ],
    'average': [
        {
            'title': 'Mindful Evening Routine',
            'description': 'Practice 10 minutes of meditation or deep breathing exercises before bed to reduce stress.',
            'icon': 'meditation'
        },
        {
            'title': 'Regular Exercise',
            'description': 'Engage in moderate exercise during the day, but avoid vigorous workouts close to bedtime.',
            'icon': 'exercise'
        },
        {
            'title': 'Balanced Diet',
            'description': 'Avoid heavy meals close to bedtime and limit caffeine intake after midday.',
            'icon': 'food'
        },
        {
            'title': 'Natural Light Exposure',
            'description': 'Get 15-30 minutes of morning sunlight to help regulate your circadian rhythm.',
            'icon': 'sun'
        }
    ],
    'good': [
        {
            'title': 'Maintain Your Success',
            'description': 'Keep up your current sleep habits and gradually try to optimize your sleep schedule further.',
            'icon': 'moon'
        },
        {
            'title': 'Advanced Sleep Hygiene',
            'description': 'Consider using sleep tracking apps to identify patterns and optimize your sleep quality.',
            'icon': 'phone'
        },
        {
            'title': 'Stress Management',
            'description': 'Practice gratitude journaling or mindfulness to maintain mental well-being.',
            'icon': 'meditation'
        },
        {
            'title': 'Sleep Optimization',
            'description': 'Experiment with different pillow types or mattress firmness to find your optimal sleep setup.',
            'icon': 'bed'
        }
    ]
}
