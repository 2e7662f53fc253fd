"""
Phase decision: classify the most recent days, detect a persistent
multi-metric deviation, and produce the phase label and reason.

Decision order is fixed by config.trend.direction_priority. The first direction
that reaches min_signals wins. No state is carried across calls.
"""

from typing import Dict, Optional, Sequence

from loguru import logger

from phasewatch.baseline import compute_baseline
from phasewatch.classifier import classify_day
from phasewatch.config import CONSIDER_ADJUSTMENT, HIGHER, LOWER, OBSERVE, PhaseConfig
from phasewatch.records import (
    METRICS,
    DailyRecord,
    DecisionResult,
    InsufficientHistoryError,
    MetricVerdicts,
)


# ---------------------------------------------------------------------------
# Trend counting
# ---------------------------------------------------------------------------

def count_consecutive(day_verdicts: Sequence[MetricVerdicts], direction: str) -> int:
    """
    Count metrics whose verdict equals `direction` on every given day.

    A metric absent on any day never counts, in either direction.
    """
    count = 0
    for metric in METRICS:
        verdicts = [day.get(metric) for day in day_verdicts]
        if any(v is None for v in verdicts):
            continue
        if all(v == direction for v in verdicts):
            count += 1
    return count


def select_direction(counts: Dict[str, int], cfg: PhaseConfig) -> Optional[str]:
    """First direction in priority order whose count reaches min_signals."""
    for direction in cfg.trend.direction_priority:
        if counts.get(direction, 0) >= cfg.trend.min_signals:
            return direction
    return None


def build_reason(direction: Optional[str], count: int, cfg: PhaseConfig) -> str:
    """Fixed one-line reason; names the direction, never the metrics."""
    r = cfg.reasons
    if direction == LOWER:
        return r.lower.format(count=count, days=cfg.trend.consecutive_days)
    if direction == HIGHER:
        return r.higher.format(count=count, days=cfg.trend.consecutive_days)
    return r.observe


# ---------------------------------------------------------------------------
# Decision
# ---------------------------------------------------------------------------

def decide(
    records: Sequence[DailyRecord],
    cfg: Optional[PhaseConfig] = None,
) -> DecisionResult:
    """
    Decide today's phase from an ascending-by-date sequence of records.

    The baseline window is drawn from the full input, today included.
    The returned verdicts are always today's.

    Raises:
        InsufficientHistoryError: if fewer records than
            cfg.trend.consecutive_days are supplied.
    """
    if cfg is None:
        cfg = PhaseConfig()

    days = cfg.trend.consecutive_days
    if len(records) < days:
        raise InsufficientHistoryError(
            f"At least {days} days of data required, got {len(records)}."
        )

    baseline = compute_baseline(records, cfg)

    # Oldest first, today last.
    recent = [
        classify_day(record, baseline, cfg.tolerance.percent)
        for record in records[-days:]
    ]
    today = recent[-1]

    counts = {direction: count_consecutive(recent, direction) for direction in (LOWER, HIGHER)}
    direction = select_direction(counts, cfg)

    logger.debug(
        f"Trend counts over {days} days: lower={counts[LOWER]} higher={counts[HIGHER]} "
        f"→ {direction or 'none'}"
    )

    if direction is None:
        return DecisionResult(
            phase=OBSERVE,
            verdicts=today,
            reason=build_reason(None, 0, cfg),
            baseline=baseline,
        )

    count = counts[direction]
    return DecisionResult(
        phase=CONSIDER_ADJUSTMENT,
        verdicts=today,
        reason=build_reason(direction, count, cfg),
        baseline=baseline,
        direction=direction,
        signal_count=count,
    )
