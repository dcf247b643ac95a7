# config.py
# Prototype thresholds + settings (tweak here, not in the formulas)
import os


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


THRESHOLDS = {
    # Heart rate (bpm)
    "hr_low": 60,
    "hr_high": 100,

    # Blood oxygen (%)
    "spo2_ok": 95,

    # Sleep (hours)
    "sleep_min": 7,
    "sleep_max": 9,

    # BMI bands
    "bmi_under": 18.5,
    "bmi_over": 25,
    "bmi_obese": 30,

    # Risk-relevant readings
    "systolic_high": 140,
    "sugar_high": 126,
}

HEALTH_SCORE = {
    "base": 70,
    "hr_bonus": 10,
    "hr_penalty": 5,
    "spo2_bonus": 10,
    "spo2_penalty": 10,
    "sleep_bonus": 10,
    "sleep_penalty": 5,
    "excellent": 80,
    "good": 70,
}

ORGAN = {
    "base": 75,
    "heart_normal": 90,
    "heart_high": 60,
    "heart_low": 70,
    "lungs_ok": 90,
    "lungs_low": 60,
    "brain_ok": 95,
    "brain_poor": 70,
    "band_good": 80,
    "band_fair": 60,
}

RISK = {
    "base": {
        "cardiovascular": 15,
        "diabetes": 10,
        "hypertension": 20,
        "obesity": 5,
        "stroke": 8,
    },
    "age_middle": 40,
    "age_senior": 60,
    # Floors assigned (not added) when the condition is listed
    "diabetes_floor": 80,
    "hypertension_floor": 75,
    "obesity_overweight": 30,
    "obesity_obese": 60,
    # Levels
    "low": 20,
    "moderate": 50,
    "alert": 50,
}

CHAT = {
    # Simulated thinking time = base + random * spread (seconds)
    "delay_base_s": 1.5,
    "delay_spread_s": 1.0,
    "delay_scale": _env_float("CHAT_DELAY_SCALE", 1.0),
}

SIMULATION = {
    # (low, spread): value = low + random * spread
    "heart_rate": (60, 40),
    "systolic": (110, 30),
    "diastolic": (70, 20),
    "blood_sugar": (80, 40),
    "spo2": (95, 5),
    "respiratory_rate": (12, 8),
    "body_temp": (36.1, 1.5),
    "calories": (1500, 1000),
    "water": (1.5, 2),
    "sleep": (6, 3),
    "exercise_minutes": (20, 40),
    "exercise_type": "Walking",
}

APP = {
    "title": "Digital Twin Health",
    "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
    "disclaimer": (
        "Educational demo only. Scores and predictions are heuristics, "
        "not medical advice. Always consult qualified healthcare providers."
    ),
}
