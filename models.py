# models.py
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in the required fields (Name, Age, Sex)"


class ProfileValidationError(ValueError):
    """Raised when a profile is saved without name, age or sex."""


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class BloodGroup(str, Enum):
    A_POS = "A+"
    A_NEG = "A-"
    B_POS = "B+"
    B_NEG = "B-"
    AB_POS = "AB+"
    AB_NEG = "AB-"
    O_POS = "O+"
    O_NEG = "O-"


class ActivityLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and v.strip() == "")


def to_int(v: Any) -> Optional[int]:
    """Best-effort int parse; blank or non-numeric input means no data."""
    if _blank(v) or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    try:
        return int(float(str(v).strip()))
    except (TypeError, ValueError, OverflowError):
        logger.debug("Ignoring non-integer input %r", v)
        return None


def to_float(v: Any) -> Optional[float]:
    """Best-effort float parse; blank or non-numeric input means no data."""
    if _blank(v) or isinstance(v, bool):
        return None
    try:
        value = float(str(v).strip())
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric input %r", v)
        return None
    if not math.isfinite(value):
        logger.debug("Ignoring non-finite input %r", v)
        return None
    return value


def to_text(v: Any) -> Optional[str]:
    if _blank(v):
        return None
    return str(v).strip()


def form_text(v: Any) -> str:
    """Inverse of the parsers above: the text a form field should show back."""
    if v is None:
        return ""
    if isinstance(v, Enum):
        return v.value
    return repr(v) if isinstance(v, float) else str(v)


def to_enum(enum_cls, v: Any):
    if isinstance(v, enum_cls):
        return v
    if _blank(v):
        return None
    raw = str(v).strip()
    for member in enum_cls:
        if member.value.lower() == raw.lower():
            return member
    logger.debug("Unknown %s value %r", enum_cls.__name__, v)
    return None


def to_labels(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = values.split(",")
    return tuple(str(x).strip() for x in values if not _blank(x))


@dataclass(frozen=True)
class Profile:
    name: str = ""
    age: Optional[int] = None
    sex: Optional[Sex] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    blood_group: Optional[BloodGroup] = None
    conditions: Tuple[str, ...] = field(default_factory=tuple)
    allergies: Tuple[str, ...] = field(default_factory=tuple)
    genetic_traits: str = ""
    medical_history: str = ""

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> "Profile":
        height = to_float(data.get("height_cm"))
        weight = to_float(data.get("weight_kg"))
        return cls(
            name=(data.get("name") or "").strip(),
            age=to_int(data.get("age")),
            sex=to_enum(Sex, data.get("sex")),
            height_cm=height if height and height > 0 else None,
            weight_kg=weight if weight and weight > 0 else None,
            blood_group=to_enum(BloodGroup, data.get("blood_group")),
            conditions=to_labels(data.get("conditions")),
            allergies=to_labels(data.get("allergies")),
            genetic_traits=(data.get("genetic_traits") or "").strip(),
            medical_history=(data.get("medical_history") or "").strip(),
        )

    def missing_required(self) -> Tuple[str, ...]:
        missing = []
        if not self.name.strip():
            missing.append("name")
        if self.age is None or self.age < 0:
            missing.append("age")
        if self.sex is None:
            missing.append("sex")
        return tuple(missing)

    def validate(self) -> None:
        missing = self.missing_required()
        if missing:
            raise ProfileValidationError(REQUIRED_FIELDS_MESSAGE)

    def has_condition(self, label: str) -> bool:
        needle = label.lower()
        return any(needle in c.lower() for c in self.conditions)


@dataclass(frozen=True)
class VitalsReading:
    heart_rate_bpm: Optional[int] = None
    blood_pressure: Optional[str] = None
    blood_sugar_mgdl: Optional[int] = None
    spo2_pct: Optional[float] = None
    respiratory_rate: Optional[int] = None
    body_temp_c: Optional[float] = None
    calories_consumed: Optional[int] = None
    water_intake_l: Optional[float] = None
    activity_level: Optional[ActivityLevel] = None
    sleep_duration_h: Optional[float] = None
    exercise_type: Optional[str] = None
    exercise_duration_min: Optional[int] = None

    @classmethod
    def from_form(cls, data: Dict[str, Any]) -> "VitalsReading":
        return cls(
            heart_rate_bpm=to_int(data.get("heart_rate_bpm")),
            blood_pressure=to_text(data.get("blood_pressure")),
            blood_sugar_mgdl=to_int(data.get("blood_sugar_mgdl")),
            spo2_pct=to_float(data.get("spo2_pct")),
            respiratory_rate=to_int(data.get("respiratory_rate")),
            body_temp_c=to_float(data.get("body_temp_c")),
            calories_consumed=to_int(data.get("calories_consumed")),
            water_intake_l=to_float(data.get("water_intake_l")),
            activity_level=to_enum(ActivityLevel, data.get("activity_level")),
            sleep_duration_h=to_float(data.get("sleep_duration_h")),
            exercise_type=to_text(data.get("exercise_type")),
            exercise_duration_min=to_int(data.get("exercise_duration_min")),
        )

    def _bp_part(self, idx: int) -> Optional[int]:
        if not self.blood_pressure:
            return None
        parts = self.blood_pressure.split("/")
        if len(parts) <= idx:
            return None
        return to_int(parts[idx])

    @property
    def systolic(self) -> Optional[int]:
        return self._bp_part(0)

    @property
    def diastolic(self) -> Optional[int]:
        return self._bp_part(1)

    def is_empty(self) -> bool:
        return all(getattr(self, f) is None for f in self.__dataclass_fields__)
