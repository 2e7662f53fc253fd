"""
Single-value classification against a baseline with a percentage tolerance band.
"""

from typing import Optional

from phasewatch.config import HIGHER, LOWER, WITHIN
from phasewatch.records import METRICS, Baseline, DailyRecord, MetricVerdicts


def classify(
    value: Optional[float],
    baseline: float,
    tolerance_percent: float = 5.0,
) -> Optional[str]:
    """
    Place a value relative to baseline ± tolerance_percent%.

    Returns None when the value is absent. Both bounds belong to "within".
    """
    if value is None:
        return None

    tolerance = baseline * tolerance_percent / 100
    lower_bound = baseline - tolerance
    upper_bound = baseline + tolerance

    if value < lower_bound:
        return LOWER
    if value > upper_bound:
        return HIGHER
    return WITHIN


def classify_day(
    record: DailyRecord,
    baseline: Baseline,
    tolerance_percent: float = 5.0,
) -> MetricVerdicts:
    """Classify every metric of one day against the same baseline."""
    return MetricVerdicts(**{
        metric: classify(record.value(metric), baseline.get(metric), tolerance_percent)
        for metric in METRICS
    })
