"""Heart rate, HRV and recovery calculations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

MAX_HR_FORMULA_BASE = 220
DEFAULT_AGE = 30
RESTING_HR_ANOMALY_THRESHOLD = 0.10
BASELINE_DAYS = 7

HEART_RATE_CONTEXTS = ("resting", "active", "workout", "sleep", "recovery")
HRV_CONTEXTS = ("morning", "sleep", "recovery", "workout")

_ZONE_BOUNDS = (
    (1, "Recovery", 0.50, 0.60),
    (2, "Aerobic", 0.60, 0.70),
    (3, "Tempo", 0.70, 0.80),
    (4, "Threshold", 0.80, 0.90),
    (5, "VO2 Max", 0.90, None),
)


@dataclass(frozen=True)
class HeartRateZone:
    """A numbered heart rate zone with an inclusive bpm range."""

    zone: int
    name: str
    min_bpm: int
    max_bpm: int

    def contains(self, bpm: int) -> bool:
        return self.min_bpm <= bpm <= self.max_bpm


@dataclass(frozen=True)
class ZoneDistribution:
    """Time spent in one zone and its share of the total."""

    zone: int
    name: str
    duration_seconds: int
    percentage: float


def calculate_recovery_score(hrv_current: float, hrv_baseline: float) -> float:
    """Score current HRV against baseline as a percentage clamped to 0-100.

    Without a positive baseline the score is a neutral 50.
    """
    if hrv_baseline <= 0.0:
        return 50.0
    score = hrv_current / hrv_baseline * 100.0
    return min(max(score, 0.0), 100.0)


def recovery_status(score: float) -> str:
    """Name the recovery band a score falls in."""
    if score >= 80.0:
        return "excellent"
    if score >= 60.0:
        return "good"
    if score >= 40.0:
        return "moderate"
    if score >= 20.0:
        return "low"
    return "poor"


def max_heart_rate_for_age(age: Optional[int]) -> int:
    """Estimate maximum heart rate as 220 minus age (age 30 when unknown)."""
    return MAX_HR_FORMULA_BASE - (DEFAULT_AGE if age is None else age)


def calculate_zones_percentage(max_hr: int) -> List[HeartRateZone]:
    """Split a maximum heart rate into five zones by percentage of max."""
    return [
        HeartRateZone(
            zone=number,
            name=name,
            min_bpm=int(max_hr * low),
            max_bpm=max_hr if high is None else int(max_hr * high),
        )
        for number, name, low, high in _ZONE_BOUNDS
    ]


def calculate_zone_distribution(
    heart_rates: Iterable[Tuple[int, int]],
    zones: Sequence[HeartRateZone],
) -> List[ZoneDistribution]:
    """Total the seconds spent in each zone from (bpm, seconds) readings.

    A reading counts toward the first zone containing it; readings outside
    every zone still count toward the total time.
    """
    zone_times = [0] * len(zones)
    total_time = 0
    for bpm, duration in heart_rates:
        total_time += duration
        match = next((i for i, zone in enumerate(zones) if zone.contains(bpm)), None)
        if match is not None:
            zone_times[match] += duration

    return [
        ZoneDistribution(
            zone=zone.zone,
            name=zone.name,
            duration_seconds=seconds,
            percentage=seconds / total_time * 100.0 if total_time > 0 else 0.0,
        )
        for zone, seconds in zip(zones, zone_times)
    ]


def detect_hr_anomaly(current: float, baseline: float) -> Tuple[float, bool]:
    """Return the percentage deviation from baseline and whether it exceeds 10%."""
    if baseline <= 0.0:
        return 0.0, False
    deviation = abs((current - baseline) / baseline)
    return deviation * 100.0, deviation > RESTING_HR_ANOMALY_THRESHOLD


def resting_hr_trend(current_avg: float, baseline_avg: float) -> str:
    """Describe the direction of the resting heart rate."""
    if current_avg > baseline_avg:
        return "increasing"
    if current_avg < baseline_avg:
        return "decreasing"
    return "stable"


def validate_heart_rate(bpm: int, context: Optional[str] = None) -> str:
    """Check a heart rate reading and return its context (default "resting")."""
    if bpm <= 0 or bpm >= 300:
        raise ValueError("Heart rate must be between 1 and 299 BPM")
    context = "resting" if context is None else context
    if context not in HEART_RATE_CONTEXTS:
        raise ValueError(
            "Invalid context. Must be one of: " + ", ".join(HEART_RATE_CONTEXTS)
        )
    return context


def validate_hrv(
    rmssd: float, sdnn: Optional[float] = None, context: Optional[str] = None
) -> str:
    """Check an HRV reading and return its context (default "morning")."""
    if rmssd <= 0.0 or rmssd >= 500.0:
        raise ValueError("RMSSD must be between 0 and 500 ms")
    if sdnn is not None and (sdnn <= 0.0 or sdnn >= 500.0):
        raise ValueError("SDNN must be between 0 and 500 ms")
    context = "morning" if context is None else context
    if context not in HRV_CONTEXTS:
        raise ValueError("Invalid context. Must be one of: " + ", ".join(HRV_CONTEXTS))
    return context