"""
DreamTrack sleep insights.

This package contains the functionality for:
- Sleep duration and score calculation
- Quality band classification
- Insight, recommendation and tip generation
- Dashboard metrics
- The HTTP API
"""

__version__ = "0.1.0"
