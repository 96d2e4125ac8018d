#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Command line sleep advisor: scores a night against recent history and prints
insights, recommendations and tips.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from dreamtrack.config.config_manager import ConfigManager
from dreamtrack.core.models.data_models import SleepForm, SleepSample
from dreamtrack.core.services.sleep_service import SleepService

logger = logging.getLogger(__name__)

DURATION_COLUMNS = ['sleepHours', 'sleep_hours', 'duration']


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Score a night of sleep and generate recommendations')

    parser.add_argument('--bedtime', type=str, required=True, help='Bedtime as HH:MM')
    parser.add_argument('--wake-time', type=str, required=True, help='Wake time as HH:MM')
    parser.add_argument('--restlessness', type=int, default=0, help='Restlessness rating (0-10)')

    parser.add_argument(
        '--history',
        type=str,
        default=None,
        help='CSV file of previous nights with sleepHours (or duration) and restlessness columns'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration file (default: config/config.yaml if present)'
    )

    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Write the analysis as JSON to this file'
    )

    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    return parser.parse_args(argv)


def load_history(file_path, window):
    """Load the most recent samples from a history CSV."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"History file not found: {file_path}")

    data = pd.read_csv(file_path)
    logger.info(f"Loaded {len(data)} records from {file_path}")

    duration_col = next((col for col in DURATION_COLUMNS if col in data.columns), None)
    if duration_col is None or 'restlessness' not in data.columns:
        raise ValueError(
            f"History file must contain restlessness and one of: {', '.join(DURATION_COLUMNS)}"
        )

    # Newest first when timestamps are available
    if 'timestamp' in data.columns:
        data['timestamp'] = pd.to_datetime(data['timestamp'], utc=True, format='ISO8601')
        data = data.sort_values('timestamp', ascending=False)

    data = data.dropna(subset=[duration_col, 'restlessness']).head(window)

    return [
        SleepSample(duration=float(row[duration_col]), restlessness=int(row['restlessness']))
        for _, row in data.iterrows()
    ]


def print_analysis(record, analysis, tips):
    """Print the analysis in a readable format."""
    print("\n" + "=" * 60)
    print("SLEEP ANALYSIS")
    print("=" * 60)
    print(f"  Bedtime - Wake:  {record.bedtime} - {record.wake_time}")
    print(f"  Sleep duration:  {analysis.duration:.1f}h")
    print(f"  Quality:         {analysis.quality.value}")
    print(f"  Sleep score:     {analysis.score}")

    print("\nKey Insights:")
    for insight in analysis.insights or ["No comparison with previous nights"]:
        print(f"  - {insight}")

    print("\nRecommendations:")
    for recommendation in analysis.recommendations or ["Keep up your current routine"]:
        print(f"  - {recommendation}")

    print(f"\nSleep Tips (score {analysis.score}):")
    for tip in tips:
        print(f"  * {tip.title}: {tip.description}")


def main(argv=None):
    """Main entry point for the sleep advisor."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = ConfigManager(args.config)
        service = SleepService(config.config)

        form = SleepForm(bedtime=args.bedtime, wake_time=args.wake_time, restlessness=args.restlessness)

        history = load_history(args.history, service.history_window) if args.history else []

        record = service.build_record(form)
        analysis = service.evaluate(record.sleep_hours, record.restlessness, history)
        print_analysis(record, analysis, service.get_tips(analysis.score))

        if args.output:
            Path(args.output).parent.mkdir(parents=True, exist_ok=True)
            with open(args.output, 'w') as f:
                json.dump(
                    {'record': record.model_dump(by_alias=True), 'analysis': analysis.model_dump(mode='json')},
                    f,
                    indent=2
                )
            logger.info(f"Analysis saved to {args.output}")

    except FileNotFoundError as e:
        logger.error(f"File error: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid sleep entry: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Data validation error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
