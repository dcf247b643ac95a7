"""
Unit tests for metrics derivation: BMI, health score, organ health, risks,
insights and the outlook projections.
"""
import pytest

from metrics import (
    bmi,
    bmi_category,
    generate_insights,
    health_score,
    health_score_breakdown,
    health_score_label,
    heart_rate_status,
    high_risk_alert,
    organ_band,
    organ_health,
    organ_status,
    overall_organ_health,
    predict_outlook,
    recommendations,
    risk_level,
    risk_scores,
    spo2_status,
)
from models import Profile, Sex, VitalsReading


def _profile(**kw):
    base = dict(name="Ada", age=30, sex=Sex.FEMALE)
    base.update(kw)
    return Profile(**base)


# -------------------------
# BMI
# -------------------------
def test_bmi_overweight_boundary():
    value = bmi(_profile(height_cm=180, weight_kg=81))
    assert value == 25.0
    assert bmi_category(value) == "Overweight"


def test_bmi_missing_inputs():
    assert bmi(None) is None
    assert bmi(_profile(height_cm=180)) is None
    assert bmi(_profile(weight_kg=70)) is None
    assert bmi_category(None) is None


@pytest.mark.parametrize("value,label", [
    (18.4, "Underweight"),
    (18.5, "Normal"),
    (24.9, "Normal"),
    (29.9, "Overweight"),
    (30.0, "Obese"),
])
def test_bmi_bands(value, label):
    assert bmi_category(value) == label


# -------------------------
# Health score
# -------------------------
def test_health_score_all_good_clamps_to_100():
    vitals = VitalsReading(heart_rate_bpm=75, spo2_pct=98, sleep_duration_h=8)
    assert health_score(vitals) == 100


def test_health_score_without_vitals_is_base():
    assert health_score(None) == 70
    assert health_score(VitalsReading()) == 70


def test_health_score_penalties():
    vitals = VitalsReading(heart_rate_bpm=110, spo2_pct=90, sleep_duration_h=5)
    score, factors = health_score_breakdown(vitals)
    assert score == 50
    assert factors == [
        "⚠️ Heart rate needs attention",
        "⚠️ Blood oxygen low",
        "⚠️ Sleep needs improvement",
    ]


def test_health_score_only_present_fields_contribute():
    # A zero heart rate is still a reading, not "no data"
    score, factors = health_score_breakdown(VitalsReading(heart_rate_bpm=0))
    assert score == 65
    assert len(factors) == 1


def test_health_score_label():
    assert health_score_label(85) == "Excellent"
    assert health_score_label(70) == "Good"
    assert health_score_label(69) == "Needs Attention"


def test_vital_status_labels():
    assert heart_rate_status(59) == "Low"
    assert heart_rate_status(60) == "Normal"
    assert heart_rate_status(101) == "High"
    assert spo2_status(94.9) == "Low"
    assert spo2_status(95) == "Normal"


# -------------------------
# Organ health
# -------------------------
def test_organ_heart():
    assert organ_health("heart", VitalsReading(heart_rate_bpm=110)) == 60
    assert organ_health("heart", VitalsReading(heart_rate_bpm=72)) == 90
    assert organ_health("heart", VitalsReading(heart_rate_bpm=50)) == 70
    assert organ_health("heart", VitalsReading()) == 75
    assert organ_health("heart", None) == 75


def test_organ_lungs_and_brain():
    assert organ_health("lungs", VitalsReading(spo2_pct=97)) == 90
    assert organ_health("lungs", VitalsReading(spo2_pct=92)) == 60
    assert organ_health("brain", VitalsReading(sleep_duration_h=8)) == 95
    assert organ_health("brain", VitalsReading(sleep_duration_h=4)) == 70
    # Each organ only looks at its own vital
    assert organ_health("brain", VitalsReading(heart_rate_bpm=110)) == 75


def test_organ_unknown_name():
    with pytest.raises(ValueError):
        organ_health("liver", None)


def test_organ_status_and_band():
    vitals = VitalsReading(heart_rate_bpm=72, spo2_pct=98.5, sleep_duration_h=7.5)
    assert organ_status("heart", vitals) == "72 BPM"
    assert organ_status("lungs", vitals) == "98.5% SpO2"
    assert organ_status("brain", vitals) == "7.5h sleep"
    assert organ_status("heart", None) == "No data"
    assert organ_band(90) == "good"
    assert organ_band(60) == "fair"
    assert organ_band(59) == "poor"


def test_overall_organ_health_is_mean_of_organs():
    assert overall_organ_health(None) == 75
    assert overall_organ_health(VitalsReading()) == 75
    vitals = VitalsReading(heart_rate_bpm=72, spo2_pct=98, sleep_duration_h=8)
    assert overall_organ_health(vitals) == pytest.approx((90 + 90 + 95) / 3)
    assert overall_organ_health(VitalsReading(heart_rate_bpm=110)) == pytest.approx((60 + 75 + 75) / 3)


# -------------------------
# Risk scores
# -------------------------
def test_risk_base_without_data():
    assert risk_scores(None, None) == {
        "cardiovascular": 15,
        "diabetes": 10,
        "hypertension": 20,
        "obesity": 5,
        "stroke": 8,
    }


def test_risk_diabetes_condition_overwrites_deltas():
    # age > 40 (+5) and BMI > 30 (+20) are applied first, then overwritten
    profile = _profile(age=50, height_cm=170, weight_kg=100, conditions=("diabetes",))
    risks = risk_scores(profile, None)
    assert risks["diabetes"] == 80
    # cv: 15 + 10 (age) + 15 (bmi) + 20 (diabetes)
    assert risks["cardiovascular"] == 60
    assert risks["obesity"] == 60


def test_risk_diabetes_condition_without_other_deltas():
    risks = risk_scores(_profile(conditions=("diabetes",)), None)
    assert risks["diabetes"] == 80


def test_risk_vitals_add_after_floor_and_clamp():
    profile = _profile(conditions=("diabetes", "Hypertension"))
    vitals = VitalsReading(blood_sugar_mgdl=150, blood_pressure="150/95")
    risks = risk_scores(profile, vitals)
    assert risks["diabetes"] == 100
    assert risks["hypertension"] == 100
    # stroke: 8 + 20 (condition) + 10 (systolic)
    assert risks["stroke"] == 38


def test_risk_age_bands():
    risks = risk_scores(_profile(age=65), None)
    assert risks["cardiovascular"] == 40
    assert risks["diabetes"] == 15
    assert risks["hypertension"] == 28
    assert risks["stroke"] == 23


def test_risk_overweight_band():
    # 170 cm / 80 kg -> BMI 27.7
    risks = risk_scores(_profile(height_cm=170, weight_kg=80), None)
    assert risks["diabetes"] == 20
    assert risks["cardiovascular"] == 23
    assert risks["obesity"] == 30


def test_risk_ignores_unparseable_blood_pressure():
    risks = risk_scores(None, VitalsReading(blood_pressure="high", heart_rate_bpm=120))
    assert risks["hypertension"] == 20
    assert risks["cardiovascular"] == 25


def test_risk_ignores_overflowing_blood_pressure():
    risks = risk_scores(None, VitalsReading(blood_pressure="1e999/80"))
    assert risks["hypertension"] == 20


def test_risk_level_bands():
    assert risk_level(19) == "Low"
    assert risk_level(20) == "Moderate"
    assert risk_level(49) == "Moderate"
    assert risk_level(50) == "High"


def test_high_risk_alert_is_independent_or():
    base = {"cardiovascular": 10, "diabetes": 10, "hypertension": 10, "obesity": 5, "stroke": 8}
    assert not high_risk_alert(base)
    assert high_risk_alert(dict(base, hypertension=60))
    assert high_risk_alert(dict(base, diabetes=51))
    assert high_risk_alert(dict(base, cardiovascular=80))
    assert not high_risk_alert(dict(base, cardiovascular=50))


# -------------------------
# Insights / outlook
# -------------------------
def test_insights_order():
    profile = _profile(height_cm=170, weight_kg=65)
    vitals = VitalsReading(heart_rate_bpm=110, sleep_duration_h=6)
    kinds = [kind for kind, _ in generate_insights(profile, vitals)]
    assert kinds == ["warning", "warning", "success"]


def test_insights_low_heart_rate_has_no_heart_entry():
    assert generate_insights(None, VitalsReading(heart_rate_bpm=50)) == []


def test_insights_normal_heart_rate():
    insights = generate_insights(None, VitalsReading(heart_rate_bpm=72, sleep_duration_h=8))
    assert insights == [("success", "Your heart rate is in the normal range. Great cardiovascular health!")]


def test_outlook_with_midpoint_random(fixed_random):
    outlook = predict_outlook(_profile(age=40), None, rng=fixed_random(0.5))
    assert outlook["next_week"]["energy_level"] == 75
    assert outlook["next_week"]["sleep_quality"] == 80.5
    assert outlook["next_month"]["weight_change_kg"] == 0
    assert outlook["next_month"]["fitness_improvement"] == 12.5
    assert outlook["next_year"]["biological_age"] == 40


def test_outlook_short_sleep_adjustments(fixed_random):
    outlook = predict_outlook(None, VitalsReading(sleep_duration_h=5), rng=fixed_random(0.5))
    week = outlook["next_week"]
    assert week["energy_level"] == 60
    assert week["sleep_quality"] == 60.5
    assert week["stress_level"] == 45
    assert outlook["next_year"]["biological_age"] is None


def test_recommendations_are_copies():
    recs = recommendations()
    assert [r["category"] for r in recs] == ["Immediate Actions", "30-Day Goals", "Long-term Strategy"]
    recs[0]["items"].clear()
    assert len(recommendations()[0]["items"]) == 4


def test_outlook_sleep_quality_jitter_range(fixed_random):
    assert predict_outlook(None, None, rng=fixed_random(0.0))["next_week"]["sleep_quality"] == 73
    top = predict_outlook(None, None, rng=fixed_random(0.999))["next_week"]["sleep_quality"]
    assert 87.9 < top < 88
