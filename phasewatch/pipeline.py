"""
Pipeline orchestration: load → records → baseline → classify → decide → report.

This is the only module with I/O (file loading, report formatting).
All analytical logic is delegated to baseline, classifier, decision.
"""

import json
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd
from loguru import logger

from phasewatch.config import HIGHER, LOWER, WITHIN, PhaseConfig
from phasewatch.decision import decide
from phasewatch.records import METRIC_FIELDS, METRICS, DailyRecord


# ---------------------------------------------------------------------------
# Data loading (CLI mode only)
# ---------------------------------------------------------------------------

REQUIRED_COLUMNS = {"date"}
METRIC_COLUMNS = tuple(METRIC_FIELDS.values())

# Alternate key → canonical column
COLUMN_ALIASES = {"sleep": "sleep_hours"}


def _prepare_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Validate columns, fill omitted metrics as absent, sort ascending by date."""
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    for alias, col in COLUMN_ALIASES.items():
        if alias not in df.columns:
            continue
        if col in df.columns:
            raise ValueError(f"Columns {alias!r} and {col!r} are both present; use {col!r}")
        logger.info(f"Reading {alias!r} as {col!r}")
        df = df.rename(columns={alias: col})

    for col in METRIC_COLUMNS:
        if col not in df.columns:
            df[col] = None

    df["date"] = pd.to_datetime(df["date"])
    if df["date"].isna().any():
        raise ValueError(f"Missing date in {int(df['date'].isna().sum())} record(s)")
    df.sort_values("date", inplace=True)
    df.reset_index(drop=True, inplace=True)
    return df


def load_data(filepath: Union[str, Path]) -> pd.DataFrame:
    """Load and validate daily readings from a JSON file."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if not data:
        raise ValueError("Data file is empty")

    df = _prepare_frame(pd.DataFrame(data))
    logger.info(f"Loaded {len(df)} daily records from {path}")
    return df


def records_from_frame(df: pd.DataFrame) -> List[DailyRecord]:
    """Convert a prepared DataFrame into DailyRecords. NaN/null becomes None."""
    records = []
    for row in df.to_dict("records"):
        values = {
            col: None if pd.isna(row[col]) else float(row[col])
            for col in METRIC_COLUMNS
        }
        records.append(DailyRecord(date=row["date"].date(), **values))
    return records


# ---------------------------------------------------------------------------
# Core analysis (pure function, no file I/O)
# ---------------------------------------------------------------------------

def _analyze_df(df: pd.DataFrame, cfg: PhaseConfig) -> Dict:
    """
    Core analysis operating purely on a DataFrame.

    Stateless.
    No file reads.
    Safe for backend / API usage.
    """
    records = records_from_frame(df)
    result = decide(records, cfg)

    return {
        "phase": result.phase,
        "reason": result.reason,
        "direction": result.direction,
        "signal_count": result.signal_count,
        "verdicts": result.verdicts.to_dict(),
        "baseline": result.baseline.to_dict(),
        "today": records[-1].date.isoformat(),
        "days_analyzed": len(records),
    }


# ---------------------------------------------------------------------------
# Public Entry Points
# ---------------------------------------------------------------------------

def analyze(
    filepath: Union[str, Path],
    cfg: PhaseConfig | None = None,
) -> Dict:
    """
    CLI-compatible entry point.
    Reads JSON file and runs analysis.
    """
    if cfg is None:
        cfg = PhaseConfig()

    df = load_data(filepath)
    return _analyze_df(df, cfg)


def analyze_data(
    data: list[dict],
    cfg: PhaseConfig | None = None,
) -> Dict:
    """
    Backend / UI integration entry point.

    Accepts list-of-dict JSON data directly.
    No file system usage. An empty list reaches the engine and raises
    InsufficientHistoryError like any other short history.
    """
    if cfg is None:
        cfg = PhaseConfig()

    if not data:
        df = pd.DataFrame(columns=["date"])
    else:
        df = pd.DataFrame(data)

    df = _prepare_frame(df)
    return _analyze_df(df, cfg)


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

METRIC_LABELS = {"hrv": "HRV", "sleep": "Sleep", "load": "Load"}

VERDICT_DISPLAY = {
    LOWER: ("↓", "Below baseline"),
    WITHIN: ("→", "Within baseline"),
    HIGHER: ("↑", "Above baseline"),
    None: ("—", "No data"),
}


def generate_report(result: Dict) -> str:
    """Format the analysis result as a human-readable text report."""
    phase = result["phase"].replace("_", " ")

    lines = [
        "PHASEWATCH STATUS",
        "=" * 58,
        "",
        f"  Phase               : {phase}",
        f"  Reason              : {result['reason']}",
        f"  Today               : {result['today']} ({result['days_analyzed']} days analyzed)",
        "",
        "  Baseline Comparison:",
    ]

    for metric in METRICS:
        icon, text = VERDICT_DISPLAY[result["verdicts"][metric]]
        baseline = result["baseline"][metric]
        lines.append(
            f"    {METRIC_LABELS[metric]:6s} : {icon} {text:16s} (baseline: {baseline:g})"
        )

    lines.append("")
    lines.append("=" * 58)
    return "\n".join(lines)
