#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Mood Insights Setup Script

This script prepares the mood insights package for development by:
1. Creating the working directories
2. Installing the package with its test extra
3. Generating sample data
4. Running the insights analysis for every sample user

Usage:
    python setup_repo.py [--skip-install] [--skip-data] [--skip-analysis] [--start-api]

Options:
    --skip-install      Skip installing the package
    --skip-data         Skip generating sample data (use if data/sample already exists)
    --skip-analysis     Skip running the insights analysis
    --start-api         Start the API server after setup
"""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ANSI color codes for better readability
class Colors:
    GREEN = '\033[0;32m'
    BLUE = '\033[0;34m'
    YELLOW = '\033[0;33m'
    RED = '\033[0;31m'
    NC = '\033[0m'  # No Color


def print_color(color, text):
    """Print colored text"""
    print(f"{color}{text}{Colors.NC}")


def run_command(command, description, exit_on_error=True):
    """Run a command with error handling"""
    print_color(Colors.YELLOW, f"\n{description}...")
    try:
        result = subprocess.run(command, check=True, text=True, capture_output=True)
        print_color(Colors.GREEN, f"✓ {description} completed successfully")
        return result.stdout
    except subprocess.CalledProcessError as e:
        print_color(Colors.RED, f"✗ {description} failed with code {e.returncode}")
        print(f"STDOUT: {e.stdout}")
        print(f"STDERR: {e.stderr}")
        if exit_on_error:
            sys.exit(1)
        return None


def create_directories():
    """Create necessary directories"""
    print_color(Colors.YELLOW, "Creating required directories...")
    for directory in ["data/sample", "reports/insights", "logs"]:
        Path(directory).mkdir(parents=True, exist_ok=True)
    print_color(Colors.GREEN, "✓ Directories created")


def install_package():
    """Install the package in editable mode"""
    print_color(Colors.BLUE, "\n=== Installing Package ===")
    run_command([sys.executable, "-m", "pip", "install", "-e", ".[test]"], "Package installation")


def generate_sample_data():
    """Generate sample mood, sleep and activity data"""
    print_color(Colors.BLUE, "\n=== Generating Sample Data ===")
    run_command(
        [sys.executable, "scripts/generate_sample_data.py", "--output-dir", "data/sample", "--seed", "42"],
        "Sample data generation"
    )


def run_insights():
    """Run the insights analysis for all sample users"""
    print_color(Colors.BLUE, "\n=== Running Insights Analysis ===")
    run_command(
        [sys.executable, "scripts/run_mood_insights.py", "--all-users",
         "--data-dir", "data/sample", "--output-dir", "reports/insights"],
        "Insights analysis",
        exit_on_error=False
    )


def start_api_server():
    """Start the API server"""
    print_color(Colors.BLUE, "\n=== Starting API Server ===")
    print_color(Colors.YELLOW, "API will be available at http://localhost:8000")
    print_color(Colors.YELLOW, "To stop the server, press Ctrl+C")
    subprocess.run([sys.executable, "-m", "uvicorn", "mood_insights.api.main:app",
                    "--reload", "--host", "0.0.0.0", "--port", "8000"])


def main():
    """Main function"""
    parser = argparse.ArgumentParser(description='Mood Insights Setup Script')
    parser.add_argument('--skip-install', action='store_true', help='Skip installing the package')
    parser.add_argument('--skip-data', action='store_true', help='Skip generating sample data')
    parser.add_argument('--skip-analysis', action='store_true', help='Skip the analysis step')
    parser.add_argument('--start-api', action='store_true', help='Start the API server after setup')
    args = parser.parse_args()

    print_color(Colors.BLUE, "================================================")
    print_color(Colors.BLUE, "Mood Insights - Development Setup Script")
    print_color(Colors.BLUE, "================================================")

    create_directories()

    if not args.skip_install:
        install_package()

    if not args.skip_data:
        generate_sample_data()
    else:
        print_color(Colors.YELLOW, "\nSkipping sample data generation as requested")

    if not args.skip_analysis:
        run_insights()
    else:
        print_color(Colors.YELLOW, "\nSkipping analysis as requested")

    print_color(Colors.GREEN, "\n================================================")
    print_color(Colors.GREEN, "Setup completed successfully!")
    print_color(Colors.GREEN, "================================================")
    print("\nThe following resources have been created:")
    print("  - Sample data: data/sample/")
    print("  - Insights reports: reports/insights/")

    if args.start_api:
        start_api_server()
    else:
        print("\nTo start the API server, run:")
        print("  uvicorn mood_insights.api.main:app --reload --host 0.0.0.0 --port 8000")


if __name__ == "__main__":
    main()
