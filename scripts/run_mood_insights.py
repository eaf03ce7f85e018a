#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Run the mood insights analysis for one user (or every user) and print or save
the JSON report.

Usage:
    python scripts/run_mood_insights.py --user-id USER [--data-dir data/sample] [--days 30]
    python scripts/run_mood_insights.py --all-users --output-dir reports/insights
"""

import argparse
import asyncio
import logging
import os
import sys

# Add the project root to the path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from mood_insights.config.config_manager import ConfigManager
from mood_insights.core.analysis.anomaly_detection import AnomalyDetector
from mood_insights.core.analysis.mood_prediction import MoodPredictor
from mood_insights.core.analysis.mood_trends import find_optimal_timing
from mood_insights.core.analysis.pattern_recognition import PatternRecognizer
from mood_insights.core.models.data_models import WellnessSession
from mood_insights.core.repositories.data_repository import DataRepository
from mood_insights.core.services.insights_service import InsightsService
from mood_insights.utils.data_validation import FileValidator

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_service(config, data_dir):
    repository = DataRepository(data_dir or config.get('repository.data_dir', 'data/sample'))
    return InsightsService(
        repository,
        MoodPredictor(config.mood_prediction_config()),
        PatternRecognizer(config.pattern_recognition_config()),
        AnomalyDetector(config.anomaly_detection_config())
    )


async def run(args):
    config = ConfigManager(args.config)
    service = build_service(config, args.data_dir)

    user_ids = service.repository.get_user_ids() if args.all_users else [args.user_id]
    if not user_ids or user_ids == [None]:
        print("Error: pass --user-id or --all-users")
        return 1

    sessions = FileValidator.validate_json(args.sessions_file, WellnessSession) if args.sessions_file else []

    exit_code = 0
    for user_id in user_ids:
        report = await service.generate_report(user_id, args.days)
        if isinstance(report, dict):
            logger.error(report['message'])
            exit_code = 1
            continue

        output = report.model_dump_json(indent=2)
        if args.output_dir:
            os.makedirs(args.output_dir, exist_ok=True)
            path = os.path.join(args.output_dir, f"{user_id}_insights.json")
            with open(path, 'w') as f:
                f.write(output)
            print(f"Report for {user_id} saved to {path}")
        else:
            print(output)

        if sessions:
            timing = find_optimal_timing(sessions, service.repository.get_mood_data(user_id, args.days))
            print(timing.model_dump_json(indent=2))

    return exit_code


def main():
    parser = argparse.ArgumentParser(description='Run mood insights for stored data')
    parser.add_argument('--user-id', help='User to analyze')
    parser.add_argument('--all-users', action='store_true', help='Analyze every user in the data directory')
    parser.add_argument('--data-dir', default=None, help='Directory holding moods.csv, sleep.csv and activity.csv')
    parser.add_argument('--days', type=int, default=30, help='Number of recent days to analyze')
    parser.add_argument('--config', default=None, help='Analytics config file')
    parser.add_argument('--output-dir', default=None, help='Write one JSON report per user here')
    parser.add_argument('--sessions-file', default=None, help='JSON list of wellness sessions for timing advice')
    args = parser.parse_args()

    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
