# simulator.py
import random

from config import SIMULATION
from models import ActivityLevel, VitalsReading


def _draw(rng, key: str) -> float:
    low, spread = SIMULATION[key]
    return low + rng.random() * spread


def simulate_vitals(rng=random) -> VitalsReading:
    """One plausible "real-time" reading; every field is filled in."""
    return VitalsReading(
        heart_rate_bpm=round(_draw(rng, "heart_rate")),
        blood_pressure=f"{round(_draw(rng, 'systolic'))}/{round(_draw(rng, 'diastolic'))}",
        blood_sugar_mgdl=round(_draw(rng, "blood_sugar")),
        spo2_pct=round(_draw(rng, "spo2"), 1),
        respiratory_rate=round(_draw(rng, "respiratory_rate")),
        body_temp_c=round(_draw(rng, "body_temp"), 1),
        calories_consumed=round(_draw(rng, "calories")),
        water_intake_l=round(_draw(rng, "water"), 1),
        activity_level=ActivityLevel.MEDIUM if rng.random() > 0.5 else ActivityLevel.HIGH,
        sleep_duration_h=round(_draw(rng, "sleep"), 1),
        exercise_type=SIMULATION["exercise_type"],
        exercise_duration_min=round(_draw(rng, "exercise_minutes")),
    )
