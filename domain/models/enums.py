"""
Enumerations shared by the catalog, routines and workout logs.
"""

from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle groups an exercise can target."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    CORE = "core"
    CARDIO = "cardio"


class Equipment(str, Enum):
    """Equipment used by an exercise or required by a routine."""

    BODYWEIGHT = "bodyweight"
    DUMBBELLS = "dumbbells"
    BARBELL = "barbell"
    MACHINE = "machine"
    CABLE = "cable"
    RESISTANCE_BAND = "resistance_band"
    KETTLEBELL = "kettlebell"


class Difficulty(str, Enum):
    """Difficulty level of an exercise or routine."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class RoutineCategory(str, Enum):
    """Training focus of a routine."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    SPORTS = "sports"
    REHABILITATION = "rehabilitation"
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"


class DurationBucket(str, Enum):
    """Routine length buckets used by the routine summary."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @classmethod
    def for_minutes(cls, minutes: float) -> "DurationBucket":
        """
        Examples:
            >>> DurationBucket.for_minutes(30)
            <DurationBucket.SHORT: 'short'>
            >>> DurationBucket.for_minutes(61)
            <DurationBucket.LONG: 'long'>
        """
        if minutes <= 30:
            return cls.SHORT
        if minutes <= 60:
            return cls.MEDIUM
        return cls.LONG
