import random

from models import ActivityLevel
from simulator import simulate_vitals


def test_simulated_reading_is_complete_and_in_range():
    rng = random.Random(42)
    for _ in range(20):
        vitals = simulate_vitals(rng)
        assert not any(getattr(vitals, f) is None for f in vitals.__dataclass_fields__)
        assert 60 <= vitals.heart_rate_bpm <= 100
        assert 110 <= vitals.systolic <= 140
        assert 70 <= vitals.diastolic <= 90
        assert 95 <= vitals.spo2_pct <= 100
        assert 6 <= vitals.sleep_duration_h <= 9
        assert vitals.activity_level in (ActivityLevel.MEDIUM, ActivityLevel.HIGH)
        assert vitals.exercise_type == "Walking"


def test_simulation_with_fixed_source(fixed_random):
    low = simulate_vitals(fixed_random(0.0))
    assert low.heart_rate_bpm == 60
    assert low.blood_pressure == "110/70"
    assert low.activity_level is ActivityLevel.HIGH

    high = simulate_vitals(fixed_random(0.9))
    assert high.heart_rate_bpm == 96
    assert high.activity_level is ActivityLevel.MEDIUM
