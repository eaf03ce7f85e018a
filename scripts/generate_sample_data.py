#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Generate synthetic mood, sleep and activity CSV files for demos and manual testing.

Usage:
    python scripts/generate_sample_data.py [--output-dir data/sample] [--users 5] [--days 60] [--seed 42]
"""

import argparse
import logging
import os
import sys

# Add the project root to the path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from mood_insights.core.repositories.data_repository import (
    ACTIVITY_FILE,
    MOOD_FILE,
    SLEEP_FILE,
    DataRepository,
)
from mood_insights.data_generation.mood_data_generator import MoodDataGenerator

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description='Generate sample mood insights data')
    parser.add_argument('--config', default='config/data_generation_config.yaml', help='Generation config file')
    parser.add_argument('--output-dir', default='data/sample', help='Directory for the CSV files')
    parser.add_argument('--users', type=int, default=None, help='Number of users to generate')
    parser.add_argument('--days', type=int, default=None, help='Number of days per user')
    parser.add_argument('--start-date', default=None, help='First day (YYYY-MM-DD)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible data')
    args = parser.parse_args()

    generator = MoodDataGenerator(args.config, seed=args.seed)
    frames = generator.generate(args.users, args.days, args.start_date)

    repository = DataRepository(args.output_dir)
    repository.save_records(MOOD_FILE, frames['moods'])
    repository.save_records(SLEEP_FILE, frames['sleep'])
    repository.save_records(ACTIVITY_FILE, frames['activity'])

    print(f"Sample data written to {args.output_dir}")
    print(f"Users: {', '.join(repository.get_user_ids())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
