"""Phasewatch v1.0: CLI entry point."""

import sys

from loguru import logger

from phasewatch import PhasewatchError, analyze, generate_report

if __name__ == "__main__":
    logger.enable("phasewatch")
    path = sys.argv[1] if len(sys.argv) > 1 else "test_data.json"
    try:
        result = analyze(path)
    except PhasewatchError as e:
        print(f"Not enough data yet: {e}")
        sys.exit(1)
    print(generate_report(result))
