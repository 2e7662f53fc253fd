"""
Personal baseline: per-metric median over a trailing window of daily records.

All functions are pure: no I/O, no side effects beyond logging.
"""

from typing import List, Optional, Sequence

import numpy as np
from loguru import logger

from phasewatch.config import PhaseConfig
from phasewatch.records import METRICS, Baseline, DailyRecord, EmptyDatasetError


# ---------------------------------------------------------------------------
# Statistics primitives
# ---------------------------------------------------------------------------

def median(values: Sequence[float]) -> Optional[float]:
    """
    Median of the values, or None when there are none.

    Odd count → middle element of the sorted values.
    Even count → mean of the two central elements.
    """
    if len(values) == 0:
        return None
    return float(np.median(np.asarray(values, dtype=np.float64)))


# ---------------------------------------------------------------------------
# Window selection
# ---------------------------------------------------------------------------

def select_window(records: Sequence[DailyRecord], max_size: int) -> List[DailyRecord]:
    """Trailing `max_size` records, or all of them when fewer exist."""
    return list(records[-max_size:])


# ---------------------------------------------------------------------------
# Baseline
# ---------------------------------------------------------------------------

def compute_baseline(
    records: Sequence[DailyRecord],
    cfg: Optional[PhaseConfig] = None,
) -> Baseline:
    """
    Compute the per-metric baseline over the trailing window.

    Absent readings are skipped. A metric with no readings anywhere in the
    window gets a baseline of 0.0.

    Raises:
        EmptyDatasetError: if `records` is empty.
    """
    if cfg is None:
        cfg = PhaseConfig()

    if len(records) == 0:
        raise EmptyDatasetError("No data available.")

    window = select_window(records, cfg.windows.max_size)

    values = {}
    for metric in METRICS:
        present = [r.value(metric) for r in window if r.value(metric) is not None]
        m = median(present)
        if m is None:
            logger.warning(
                f"No {metric} readings in the last {len(window)} days, baseline falls back to 0"
            )
            m = 0.0
        values[metric] = m

    return Baseline(**values)
