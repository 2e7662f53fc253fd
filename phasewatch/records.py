"""
Value types shared by the baseline, classifier and decision stages.

All types are frozen and transient: built within one engine call, never
mutated, never persisted.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np


# ---------------------------------------------------------------------------
# Metric name → DailyRecord attribute (used by multiple modules)
# ---------------------------------------------------------------------------

METRIC_FIELDS = {
    "hrv": "hrv",
    "sleep": "sleep_hours",
    "load": "load",
}

METRICS = tuple(METRIC_FIELDS)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class PhasewatchError(ValueError):
    """Caller supplied too little data for the engine to answer."""


class EmptyDatasetError(PhasewatchError):
    """Baseline requested over zero records."""


class InsufficientHistoryError(PhasewatchError):
    """Decision requested with fewer days than the trend rule compares."""


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DailyRecord:
    """One calendar day's readings. None means no reading, not zero."""

    date: dt.date
    hrv: Optional[float] = None
    sleep_hours: Optional[float] = None
    load: Optional[float] = None

    def __post_init__(self):
        for name in METRIC_FIELDS.values():
            value = getattr(self, name)
            if value is None:
                continue
            if not np.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite non-negative number, got {value} on {self.date}")

    def value(self, metric: str) -> Optional[float]:
        return getattr(self, METRIC_FIELDS[metric])


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Baseline:
    """Per-metric reference value. Always present."""

    hrv: float
    sleep: float
    load: float

    def get(self, metric: str) -> float:
        return getattr(self, metric)

    def to_dict(self) -> Dict[str, float]:
        return {m: round(self.get(m), 3) for m in METRICS}


@dataclass(frozen=True)
class MetricVerdicts:
    """Verdict per metric for one day: "lower", "within", "higher" or None."""

    hrv: Optional[str]
    sleep: Optional[str]
    load: Optional[str]

    def get(self, metric: str) -> Optional[str]:
        return getattr(self, metric)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {m: self.get(m) for m in METRICS}


@dataclass(frozen=True)
class DecisionResult:
    """
    Phase decision for the latest day.

    `verdicts` is always today's classification. `direction` and
    `signal_count` describe the trend that fired, or are None / 0 when the
    phase is OBSERVE.
    """

    phase: str
    verdicts: MetricVerdicts
    reason: str
    baseline: Baseline
    direction: Optional[str] = None
    signal_count: int = 0
