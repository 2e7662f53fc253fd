"""
Centralized configuration for window sizes, tolerance band, and trend rules.

Every tunable constant lives here. Pass a PhaseConfig into any public entry
point to override defaults without touching module state.
"""

from dataclasses import dataclass, field
from typing import Tuple


LOWER = "lower"
WITHIN = "within"
HIGHER = "higher"

OBSERVE = "OBSERVE"
CONSIDER_ADJUSTMENT = "CONSIDER_ADJUSTMENT"


# ---------------------------------------------------------------------------
# Baseline window
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WindowParams:
    """Trailing window used for the personal baseline."""

    # Most recent N records; fewer records means all of them.
    max_size: int = 14

    def __post_init__(self):
        if self.max_size < 1:
            raise ValueError(f"Window max_size must be >= 1, got {self.max_size}")


# ---------------------------------------------------------------------------
# Tolerance band
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ToleranceParams:
    """Half-width of the "within" band, as a percentage of the baseline."""

    percent: float = 5.0


# ---------------------------------------------------------------------------
# Trend rule
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TrendRules:
    """
    Multi-day, multi-metric deviation rule.

    A metric contributes to a direction when it holds that verdict on each of
    the last `consecutive_days` days. A direction fires once `min_signals`
    metrics contribute. Directions are checked in `direction_priority` order,
    first match wins: lower beats higher when both fire.
    """

    consecutive_days: int = 2
    min_signals: int = 2
    direction_priority: Tuple[str, ...] = (LOWER, HIGHER)

    def __post_init__(self):
        if self.consecutive_days < 1:
            raise ValueError(
                f"consecutive_days must be >= 1, got {self.consecutive_days}"
            )
        if sorted(self.direction_priority) != sorted((LOWER, HIGHER)):
            raise ValueError(
                f"direction_priority must order {LOWER!r} and {HIGHER!r}, "
                f"got {self.direction_priority}"
            )


# ---------------------------------------------------------------------------
# Reason wording
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReasonTemplates:
    """One-line reasons. Metric identity is never named."""

    lower: str = "{count} recovery signals have been outside baseline for {days} consecutive days."
    higher: str = "{count} load signals have been outside baseline for {days} consecutive days."
    observe: str = "Observing current state."


# ---------------------------------------------------------------------------
# Top-level config aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PhaseConfig:
    """Complete engine configuration. Pass to any entry point to override defaults."""

    windows: WindowParams = field(default_factory=WindowParams)
    tolerance: ToleranceParams = field(default_factory=ToleranceParams)
    trend: TrendRules = field(default_factory=TrendRules)
    reasons: ReasonTemplates = field(default_factory=ReasonTemplates)
