"""Composite wellness scoring from subjective daily inputs.

Five 1-7 items (sleep quality, energy, pain, stress, mood) are combined into
a 0-100 health score. Pain and stress are "higher is worse" items, so they
are inverted before weighting. An illness flag applies a flat penalty.

The symptom burden is a separate, unclamped measure built from the raw
inputs, where an absent item contributes nothing rather than a neutral
midpoint.
"""

import math
from typing import Any, Mapping, Optional, Union

from .models import DailyWellness, ResolvedWellness, coerce_number

WellnessLike = Union[DailyWellness, Mapping[str, Any], None]

SCALE_MIN = 1
SCALE_MAX = 7
NEUTRAL = 4

WEIGHTS = {
    "sleep_quality": 0.22,
    "energy": 0.22,
    "pain": 0.18,
    "stress": 0.18,
    "mood": 0.18,
}

ILLNESS_PENALTY = 0.15

_FIELDS = (
    "sleep_quality",
    "energy",
    "pain",
    "stress",
    "mood",
    "sleep_duration",
    "illness",
)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def _raw(wellness: WellnessLike, name: str) -> Any:
    if wellness is None:
        return None
    if isinstance(wellness, Mapping):
        return wellness.get(name)
    return getattr(wellness, name, None)


def resolve_wellness(wellness: WellnessLike) -> ResolvedWellness:
    """Substitute defaults for absent fields.

    The 1-7 items default to the neutral midpoint (4); sleep duration and
    the illness flag default to 0.
    """
    defaults = ResolvedWellness()
    values = {
        name: coerce_number(_raw(wellness, name), getattr(defaults, name))
        for name in _FIELDS
    }
    return ResolvedWellness(**values)


def wellness_score(wellness: WellnessLike) -> int:
    """
    Calculate the composite health score (0-100) for one day.

    Steps:
    1. Clamp every 1-7 item; invert pain and stress as 8 - value
    2. Weighted sum of the five items, normalised by 7
    3. Subtract the illness penalty when the flag is set
    4. Scale to 0-100, round, clamp

    Args:
        wellness: DailyWellness, plain mapping, or None (all defaults)

    Returns:
        Integer health score in [0, 100]
    """
    w = resolve_wellness(wellness)

    sleep = clamp(w.sleep_quality, SCALE_MIN, SCALE_MAX)
    energy = clamp(w.energy, SCALE_MIN, SCALE_MAX)
    pain_inv = 8 - clamp(w.pain, SCALE_MIN, SCALE_MAX)
    stress_inv = 8 - clamp(w.stress, SCALE_MIN, SCALE_MAX)
    mood = clamp(w.mood, SCALE_MIN, SCALE_MAX)

    base = (
        sleep * WEIGHTS["sleep_quality"]
        + energy * WEIGHTS["energy"]
        + pain_inv * WEIGHTS["pain"]
        + stress_inv * WEIGHTS["stress"]
        + mood * WEIGHTS["mood"]
    ) / SCALE_MAX

    penalty = ILLNESS_PENALTY if w.illness else 0.0

    return int(clamp(round_half_up((base - penalty) * 100), 0, 100))


def raw_sleep_quality(wellness: WellnessLike) -> float:
    """Reported sleep quality, 0 when absent."""
    return coerce_number(_raw(wellness, "sleep_quality"))


def raw_sleep_duration(wellness: WellnessLike) -> float:
    """Reported sleep duration in hours, 0 when absent."""
    return coerce_number(_raw(wellness, "sleep_duration"))


def symptom_burden(wellness: WellnessLike) -> float:
    """
    Symptom burden for one day (higher = worse recovery state).

    Fatigue (8 - energy) + pain + stress + low mood (8 - mood), using the raw
    reported values. Absent items contribute 0; nothing is clamped.
    """
    energy = coerce_number(_raw(wellness, "energy"))
    mood = coerce_number(_raw(wellness, "mood"))
    pain = coerce_number(_raw(wellness, "pain"))
    stress = coerce_number(_raw(wellness, "stress"))

    fatigue = 8 - energy if energy else 0.0
    low_mood = 8 - mood if mood else 0.0
    return fatigue + pain + stress + low_mood
