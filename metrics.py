# metrics.py
import random
from typing import Dict, List, Optional, Tuple

from config import HEALTH_SCORE, ORGAN, RISK, THRESHOLDS
from models import Profile, VitalsReading
from response_bank import RECOMMENDATIONS

ORGANS = ("heart", "lungs", "brain")


def _hr_normal(hr: int) -> bool:
    return THRESHOLDS["hr_low"] <= hr <= THRESHOLDS["hr_high"]


def _sleep_optimal(hours: float) -> bool:
    return THRESHOLDS["sleep_min"] <= hours <= THRESHOLDS["sleep_max"]


def _raw_bmi(profile: Optional[Profile]) -> Optional[float]:
    if profile is None or not profile.height_cm or not profile.weight_kg:
        return None
    h_m = profile.height_cm / 100.0
    return profile.weight_kg / (h_m * h_m)


def bmi(profile: Optional[Profile]) -> Optional[float]:
    value = _raw_bmi(profile)
    return round(value, 1) if value is not None else None


def bmi_category(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    if value < THRESHOLDS["bmi_under"]:
        return "Underweight"
    if value < THRESHOLDS["bmi_over"]:
        return "Normal"
    if value < THRESHOLDS["bmi_obese"]:
        return "Overweight"
    return "Obese"


def heart_rate_status(hr: int) -> str:
    if hr < THRESHOLDS["hr_low"]:
        return "Low"
    if hr > THRESHOLDS["hr_high"]:
        return "High"
    return "Normal"


def spo2_status(spo2: float) -> str:
    return "Low" if spo2 < THRESHOLDS["spo2_ok"] else "Normal"


def health_score_breakdown(vitals: Optional[VitalsReading]) -> Tuple[int, List[str]]:
    """
    Returns:
      score: 0-100, starting from the base and adjusted per present vital
      factors: ordered human-readable notes, one per vital that contributed
    """
    score = HEALTH_SCORE["base"]
    factors: List[str] = []
    if vitals is None:
        return score, factors

    if vitals.heart_rate_bpm is not None:
        if _hr_normal(vitals.heart_rate_bpm):
            score += HEALTH_SCORE["hr_bonus"]
            factors.append("✅ Heart rate normal")
        else:
            score -= HEALTH_SCORE["hr_penalty"]
            factors.append("⚠️ Heart rate needs attention")

    if vitals.spo2_pct is not None:
        if vitals.spo2_pct >= THRESHOLDS["spo2_ok"]:
            score += HEALTH_SCORE["spo2_bonus"]
            factors.append("✅ Blood oxygen excellent")
        else:
            score -= HEALTH_SCORE["spo2_penalty"]
            factors.append("⚠️ Blood oxygen low")

    if vitals.sleep_duration_h is not None:
        if _sleep_optimal(vitals.sleep_duration_h):
            score += HEALTH_SCORE["sleep_bonus"]
            factors.append("✅ Sleep duration optimal")
        else:
            score -= HEALTH_SCORE["sleep_penalty"]
            factors.append("⚠️ Sleep needs improvement")

    return min(100, max(0, score)), factors


def health_score(vitals: Optional[VitalsReading]) -> int:
    return health_score_breakdown(vitals)[0]


def health_score_label(score: int) -> str:
    if score >= HEALTH_SCORE["excellent"]:
        return "Excellent"
    if score >= HEALTH_SCORE["good"]:
        return "Good"
    return "Needs Attention"


def organ_health(organ: str, vitals: Optional[VitalsReading]) -> int:
    organ = organ.lower()
    if organ not in ORGANS:
        raise ValueError(f"Unknown organ: {organ!r}")

    health = ORGAN["base"]
    if vitals is None:
        return health

    if organ == "heart" and vitals.heart_rate_bpm is not None:
        hr = vitals.heart_rate_bpm
        if _hr_normal(hr):
            health = ORGAN["heart_normal"]
        elif hr > THRESHOLDS["hr_high"]:
            health = ORGAN["heart_high"]
        else:
            health = ORGAN["heart_low"]
    elif organ == "lungs" and vitals.spo2_pct is not None:
        health = ORGAN["lungs_ok"] if vitals.spo2_pct >= THRESHOLDS["spo2_ok"] else ORGAN["lungs_low"]
    elif organ == "brain" and vitals.sleep_duration_h is not None:
        health = ORGAN["brain_ok"] if _sleep_optimal(vitals.sleep_duration_h) else ORGAN["brain_poor"]

    return health


def organ_status(organ: str, vitals: Optional[VitalsReading]) -> str:
    organ = organ.lower()
    if vitals is not None:
        if organ == "heart" and vitals.heart_rate_bpm is not None:
            return f"{vitals.heart_rate_bpm} BPM"
        if organ == "lungs" and vitals.spo2_pct is not None:
            return f"{vitals.spo2_pct:g}% SpO2"
        if organ == "brain" and vitals.sleep_duration_h is not None:
            return f"{vitals.sleep_duration_h:g}h sleep"
    return "No data"


def organ_band(health: int) -> str:
    if health >= ORGAN["band_good"]:
        return "good"
    if health >= ORGAN["band_fair"]:
        return "fair"
    return "poor"


def overall_organ_health(vitals: Optional[VitalsReading]) -> float:
    return sum(organ_health(o, vitals) for o in ORGANS) / len(ORGANS)


def risk_scores(profile: Optional[Profile], vitals: Optional[VitalsReading]) -> Dict[str, int]:
    """
    Heuristic 0-100 risk percentages.

    Adjustments apply in a fixed order. Condition floors (diabetes, hypertension)
    and the obesity bands overwrite the running value; everything else adds.
    """
    risks = dict(RISK["base"])

    if profile is not None:
        age = profile.age or 0
        if age > RISK["age_middle"]:
            risks["cardiovascular"] += 10
            risks["diabetes"] += 5
            risks["hypertension"] += 8
        if age > RISK["age_senior"]:
            risks["stroke"] += 15
            risks["cardiovascular"] += 15

        value = _raw_bmi(profile)
        if value is not None:
            if value > THRESHOLDS["bmi_obese"]:
                risks["diabetes"] += 20
                risks["cardiovascular"] += 15
                risks["obesity"] = RISK["obesity_obese"]
            elif value > THRESHOLDS["bmi_over"]:
                risks["diabetes"] += 10
                risks["cardiovascular"] += 8
                risks["obesity"] = RISK["obesity_overweight"]

        if profile.has_condition("diabetes"):
            risks["diabetes"] = RISK["diabetes_floor"]
            risks["cardiovascular"] += 20
        if profile.has_condition("hypertension"):
            risks["hypertension"] = RISK["hypertension_floor"]
            risks["cardiovascular"] += 15
            risks["stroke"] += 20

    if vitals is not None:
        if vitals.heart_rate_bpm is not None and vitals.heart_rate_bpm > THRESHOLDS["hr_high"]:
            risks["cardiovascular"] += 10

        systolic = vitals.systolic
        if systolic is not None and systolic > THRESHOLDS["systolic_high"]:
            risks["hypertension"] += 30
            risks["cardiovascular"] += 15
            risks["stroke"] += 10

        if vitals.blood_sugar_mgdl is not None and vitals.blood_sugar_mgdl > THRESHOLDS["sugar_high"]:
            risks["diabetes"] += 40

    return {k: min(100, max(0, v)) for k, v in risks.items()}


def risk_level(risk: int) -> str:
    if risk < RISK["low"]:
        return "Low"
    if risk < RISK["moderate"]:
        return "Moderate"
    return "High"


def high_risk_alert(risks: Dict[str, int]) -> bool:
    return any(risks[k] > RISK["alert"] for k in ("cardiovascular", "diabetes", "hypertension"))


def generate_insights(profile: Optional[Profile], vitals: Optional[VitalsReading]) -> List[Tuple[str, str]]:
    """Returns (kind, message) pairs; kind is "warning" or "success"."""
    insights: List[Tuple[str, str]] = []

    if vitals is not None and vitals.heart_rate_bpm is not None:
        hr = vitals.heart_rate_bpm
        if hr > THRESHOLDS["hr_high"]:
            insights.append(("warning", "Your heart rate is elevated. Consider relaxation techniques or consult a doctor."))
        elif _hr_normal(hr):
            insights.append(("success", "Your heart rate is in the normal range. Great cardiovascular health!"))

    if vitals is not None and vitals.sleep_duration_h is not None:
        if vitals.sleep_duration_h < THRESHOLDS["sleep_min"]:
            insights.append(("warning", "You're not getting enough sleep. Aim for 7-9 hours for optimal health."))

    value = bmi(profile)
    if value is not None and bmi_category(value) == "Normal":
        insights.append(("success", "Your BMI is in the healthy range. Keep up the good work!"))

    return insights


def _jitter(rng, base: float, spread: float) -> float:
    # base +/- spread/2
    return base + (rng.random() * spread - spread / 2)


def predict_outlook(profile: Optional[Profile], vitals: Optional[VitalsReading], rng=random) -> Dict[str, Dict]:
    """Canned week / month / year projections with random jitter."""
    week = {
        "energy_level": _jitter(rng, 75, 20),
        "sleep_quality": 80 + (rng.random() * 15 - 7),
        "stress_level": _jitter(rng, 30, 30),
        "immune_strength": _jitter(rng, 85, 10),
    }
    month = {
        "weight_change_kg": rng.random() * 4 - 2,
        "fitness_improvement": 5 + rng.random() * 15,
        "health_score": _jitter(rng, 75, 20),
    }
    year = {
        "biological_age": (
            profile.age + (rng.random() * 2 - 1)
            if profile is not None and profile.age is not None else None
        ),
        "longevity_score": _jitter(rng, 78, 20),
    }

    if vitals is not None and vitals.sleep_duration_h is not None:
        if vitals.sleep_duration_h < THRESHOLDS["sleep_min"]:
            week["energy_level"] -= 15
            week["sleep_quality"] -= 20
            week["stress_level"] += 15

    return {"next_week": week, "next_month": month, "next_year": year}


def recommendations() -> List[Dict]:
    return [{"category": s["category"], "items": list(s["items"])} for s in RECOMMENDATIONS]
