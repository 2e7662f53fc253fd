"""
PHASEWATCH v1.0: Personal Baseline Phase Engine

Classifies today's HRV, sleep and training load against the wearer's own
recent history and returns a two-valued phase: OBSERVE or CONSIDER_ADJUSTMENT.
Core engine is fully stateless and safe for backend/API usage.

Architecture:
    config     : Window size, tolerance band, trend rules (single source of truth)
    records    : Daily record, baseline, verdict and result value types; errors
    baseline   : Trailing-window median per metric
    classifier : lower / within / higher against baseline ± tolerance
    decision   : Two-day, multi-metric trend rule → phase + reason
    pipeline   : Orchestration: load → baseline → classify → decide → report

Public API:
    decide(records)         → DecisionResult
    analyze(filepath)       → CLI mode
    analyze_data(data)      → UI / backend mode
    generate_report(result) → formatted report
"""

from loguru import logger

from phasewatch.config import PhaseConfig
from phasewatch.decision import decide
from phasewatch.pipeline import analyze, analyze_data, generate_report
from phasewatch.records import (
    DailyRecord,
    EmptyDatasetError,
    InsufficientHistoryError,
    PhasewatchError,
)

__version__ = "1.0.0"

# Library stays quiet until an application opts in with logger.enable("phasewatch").
logger.disable("phasewatch")

__all__ = [
    "PhaseConfig",
    "DailyRecord",
    "PhasewatchError",
    "EmptyDatasetError",
    "InsufficientHistoryError",
    "decide",
    "analyze",
    "analyze_data",
    "generate_report",
]
