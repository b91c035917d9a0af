"""Biomarker classification and supplement adherence calculations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional
from uuid import UUID

VALID_FREQUENCIES = ("daily", "twice_daily", "weekly", "as_needed")


class Classification(str, Enum):
    """Where a biomarker value falls relative to its reference range."""

    CRITICAL_LOW = "critical_low"
    LOW = "low"
    OPTIMAL = "optimal"
    HIGH = "high"
    CRITICAL_HIGH = "critical_high"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SupplementAdherence:
    """How consistently a supplement was taken over a date range."""

    supplement_id: UUID
    supplement_name: str
    total_days: int
    days_taken: int
    days_skipped: int
    adherence_percent: float


def classify_value(
    value: float,
    low_threshold: Optional[float],
    optimal_min: Optional[float],
    optimal_max: Optional[float],
    high_threshold: Optional[float],
) -> Classification:
    """Classify a value against optional critical and optimal thresholds."""
    if low_threshold is not None and value < low_threshold:
        return Classification.CRITICAL_LOW
    if optimal_min is not None and value < optimal_min:
        return Classification.LOW
    if optimal_max is not None and value > optimal_max:
        if high_threshold is not None and value > high_threshold:
            return Classification.CRITICAL_HIGH
        return Classification.HIGH
    if high_threshold is not None and value > high_threshold:
        return Classification.CRITICAL_HIGH
    return Classification.OPTIMAL


def calculate_adherence(days_taken: int, total_days: int) -> float:
    """Return days_taken as a percentage of total_days, or 0 for no days."""
    if total_days <= 0:
        return 0.0
    return days_taken / total_days * 100.0


def validate_supplement_frequency(frequency: str) -> str:
    """Return the frequency if it is supported, else raise ValueError."""
    if frequency not in VALID_FREQUENCIES:
        raise ValueError(
            "Invalid frequency. Must be one of: " + ", ".join(VALID_FREQUENCIES)
        )
    return frequency


def adherence_between(
    supplement_id: UUID,
    supplement_name: str,
    days_taken: int,
    days_skipped: int,
    start_date: date,
    end_date: date,
) -> SupplementAdherence:
    """Build adherence figures for an inclusive date range."""
    total_days = (end_date - start_date).days + 1
    return SupplementAdherence(
        supplement_id=supplement_id,
        supplement_name=supplement_name,
        total_days=total_days,
        days_taken=days_taken,
        days_skipped=days_skipped,
        adherence_percent=calculate_adherence(days_taken, total_days),
    )