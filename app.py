import logging
import time

import streamlit as st
import pandas as pd
import matplotlib.pyplot as plt

from config import APP
from models import ActivityLevel, BloodGroup, Profile, ProfileValidationError, Sex, VitalsReading, form_text
from metrics import (
    ORGANS,
    bmi,
    bmi_category,
    generate_insights,
    health_score,
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
from chat import ChatMessage, generate_reply, reply_delay
from simulator import simulate_vitals
from state import AppState, append_message, save_profile, update_vitals
from response_bank import HIGH_RISK_ALERT, QUICK_QUESTIONS

logging.basicConfig(
    level=getattr(logging, APP["log_level"], logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("app")

st.set_page_config(page_title=APP["title"], layout="wide")

if "app_state" not in st.session_state:
    st.session_state["app_state"] = AppState()

# -------------------------
# Helpers
# -------------------------
def _state() -> AppState:
    return st.session_state["app_state"]

def _set_state(new_state: AppState) -> None:
    st.session_state["app_state"] = new_state

def _commit(new_state: AppState, message: str) -> None:
    # Rerun so every tab renders from the new snapshot
    _set_state(new_state)
    st.session_state["flash"] = message
    st.rerun()

def _index(options, current) -> int:
    return options.index(current) if current in options else 0

# -------------------------
# Header + Disclaimer
# -------------------------
st.title(APP["title"])
st.info(APP["disclaimer"])

flash = st.session_state.pop("flash", None)
if flash:
    st.success(flash)

state = _state()
st.sidebar.write("Profile complete:", "✅ Yes" if state.profile else "❌ No")
st.sidebar.write("Vitals connected:", "✅ Yes" if state.vitals else "❌ No")

tabs = st.tabs(["Overview", "Profile", "Vital Signs", "Digital Twin", "AI Chat", "Predictive Analytics"])

# -------------------------
# Overview
# -------------------------
with tabs[0]:
    profile, vitals = state.profile, state.vitals

    if profile is None and vitals is None:
        st.info("Set up your profile and vital signs to see your personalized health dashboard.")
    else:
        if profile is not None:
            st.subheader(f"Welcome, {profile.name}! 👋")
            st.caption("Your Digital Twin is actively monitoring your health metrics.")

        score = health_score(vitals)
        value = bmi(profile)

        c1, c2, c3, c4 = st.columns(4)
        with c1:
            st.metric("Health Score", f"{score}/100", health_score_label(score), delta_color="off")
            st.progress(score / 100)
        with c2:
            if value is not None:
                st.metric("BMI", f"{value:.1f}", bmi_category(value), delta_color="off")
        with c3:
            if vitals is not None and vitals.heart_rate_bpm is not None:
                st.metric("Heart Rate", f"{vitals.heart_rate_bpm} BPM", heart_rate_status(vitals.heart_rate_bpm), delta_color="off")
        with c4:
            if vitals is not None and vitals.spo2_pct is not None:
                st.metric("Blood Oxygen", f"{vitals.spo2_pct:g}%", spo2_status(vitals.spo2_pct), delta_color="off")

        insights = generate_insights(profile, vitals)
        if insights:
            st.write("### AI Health Insights")
            for kind, message in insights:
                if kind == "warning":
                    st.warning(message)
                else:
                    st.success(message)

        st.write("### Quick stats")
        q1, q2, q3, q4 = st.columns(4)
        if profile is not None and profile.age is not None:
            q1.metric("Age", profile.age)
        if vitals is not None and vitals.sleep_duration_h is not None:
            q2.metric("Sleep", f"{vitals.sleep_duration_h:g}h")
        if vitals is not None and vitals.water_intake_l is not None:
            q3.metric("Water", f"{vitals.water_intake_l:g}L")
        if vitals is not None and vitals.calories_consumed is not None:
            q4.metric("Calories", vitals.calories_consumed)

# -------------------------
# Profile
# -------------------------
with tabs[1]:
    st.subheader("Basic information")
    current = state.profile or Profile()

    sex_options = [""] + [s.value for s in Sex]
    blood_options = [""] + [b.value for b in BloodGroup]

    with st.form("profile_form"):
        col_a, col_b = st.columns(2)
        with col_a:
            name = st.text_input("Name *", value=current.name)
            sex = st.selectbox(
                "Sex *", sex_options,
                index=_index(sex_options, current.sex.value if current.sex else ""),
                format_func=lambda v: v.title() if v else "Select sex",
            )
            height_cm = st.number_input("Height (cm)", min_value=0.0, max_value=300.0, value=current.height_cm, step=0.5)
        with col_b:
            age = st.number_input("Age *", min_value=0, max_value=130, value=current.age, step=1)
            blood_group = st.selectbox(
                "Blood group", blood_options,
                index=_index(blood_options, current.blood_group.value if current.blood_group else ""),
                format_func=lambda v: v or "Select blood group",
            )
            weight_kg = st.number_input("Weight (kg)", min_value=0.0, max_value=500.0, value=current.weight_kg, step=0.5)

        st.markdown("### Medical information")
        conditions = st.text_input("Known conditions (comma separated)", value=", ".join(current.conditions))
        allergies = st.text_input("Allergies (comma separated)", value=", ".join(current.allergies))
        genetic_traits = st.text_area("Genetic traits (optional)", value=current.genetic_traits)
        medical_history = st.text_area("Medical history", value=current.medical_history)

        submitted = st.form_submit_button("Save Digital Twin Profile")

    if submitted:
        draft = Profile.from_form({
            "name": name,
            "age": age,
            "sex": sex,
            "height_cm": height_cm,
            "weight_kg": weight_kg,
            "blood_group": blood_group,
            "conditions": conditions,
            "allergies": allergies,
            "genetic_traits": genetic_traits,
            "medical_history": medical_history,
        })
        try:
            new_state = save_profile(_state(), draft)
        except ProfileValidationError as e:
            logger.info("Profile save rejected: missing %s", ", ".join(draft.missing_required()))
            st.error(str(e))
        else:
            _commit(new_state, "Profile saved successfully! Your Digital Twin is now personalized.")

# -------------------------
# Vital Signs
# -------------------------
with tabs[2]:
    st.subheader("Vital signs")

    if st.button("Simulate Real-Time Data"):
        _commit(update_vitals(_state(), simulate_vitals()), "Simulated vital signs generated!")

    shown = _state().vitals or VitalsReading()
    activity_options = [""] + [a.value for a in ActivityLevel]

    with st.form("vitals_form"):
        v1, v2, v3 = st.columns(3)
        with v1:
            heart_rate = st.text_input("Heart rate (BPM)", value=form_text(shown.heart_rate_bpm), placeholder="72")
            blood_pressure = st.text_input("Blood pressure (mmHg)", value=shown.blood_pressure or "", placeholder="120/80")
            spo2 = st.text_input("Blood oxygen (%)", value=form_text(shown.spo2_pct), placeholder="98.5")
            body_temp = st.text_input("Temperature (°C)", value=form_text(shown.body_temp_c), placeholder="36.5")
        with v2:
            sleep = st.text_input("Sleep (hours)", value=form_text(shown.sleep_duration_h), placeholder="8.0")
            calories = st.text_input("Calories (kcal)", value=form_text(shown.calories_consumed), placeholder="2000")
            water = st.text_input("Water intake (L)", value=form_text(shown.water_intake_l), placeholder="2.5")
            blood_sugar = st.text_input("Blood sugar (mg/dL)", value=form_text(shown.blood_sugar_mgdl), placeholder="100")
        with v3:
            activity = st.selectbox(
                "Activity level", activity_options,
                index=_index(activity_options, shown.activity_level.value if shown.activity_level else ""),
                format_func=lambda v: v or "Select activity level",
            )
            exercise_type = st.text_input("Exercise type", value=shown.exercise_type or "", placeholder="Running")
            exercise_minutes = st.text_input("Exercise duration (min)", value=form_text(shown.exercise_duration_min), placeholder="30")
            respiratory_rate = st.text_input("Respiratory rate", value=form_text(shown.respiratory_rate), placeholder="16")

        saved = st.form_submit_button("Save Manual Input")

    if saved:
        reading = VitalsReading.from_form({
            "heart_rate_bpm": heart_rate,
            "blood_pressure": blood_pressure,
            "blood_sugar_mgdl": blood_sugar,
            "spo2_pct": spo2,
            "respiratory_rate": respiratory_rate,
            "body_temp_c": body_temp,
            "calories_consumed": calories,
            "water_intake_l": water,
            "activity_level": activity,
            "sleep_duration_h": sleep,
            "exercise_type": exercise_type,
            "exercise_duration_min": exercise_minutes,
        })
        _commit(update_vitals(_state(), reading), "Vital signs updated successfully!")

# -------------------------
# Digital Twin
# -------------------------
with tabs[3]:
    st.subheader("Organ health status")
    vitals = _state().vitals

    if _state().profile is None and vitals is None:
        st.info("Set up your profile and vital signs to activate your Digital Twin.")
    else:
        rows = []
        for organ in ORGANS:
            health = organ_health(organ, vitals)
            rows.append({
                "organ": organ.title(),
                "health_pct": health,
                "band": organ_band(health),
                "current": organ_status(organ, vitals),
            })
            st.write(f"**{organ.title()}**: {health}% ({organ_status(organ, vitals)})")
            st.progress(health / 100)

        st.dataframe(pd.DataFrame(rows))

        st.metric("Overall Health", f"{overall_organ_health(vitals):.1f}%")
        st.caption("Based on current vital signs and profile data")

# -------------------------
# AI Chat
# -------------------------
with tabs[4]:
    st.subheader("AI Health Assistant")

    history = st.container()

    st.caption("Quick questions")
    question = None
    qcols = st.columns(len(QUICK_QUESTIONS))
    for i, q in enumerate(QUICK_QUESTIONS):
        if qcols[i].button(q, key=f"quick_{i}"):
            question = q

    typed = st.chat_input("Ask me about your health...")
    question = typed or question

    if question and question.strip():
        _set_state(append_message(_state(), ChatMessage(role="user", content=question)))
        with st.spinner("Thinking..."):
            time.sleep(reply_delay())
            answer = generate_reply(question, _state().profile, _state().vitals)
        _set_state(append_message(_state(), ChatMessage(role="assistant", content=answer)))

    with history:
        for message in _state().messages:
            with st.chat_message(message.role):
                st.markdown(message.content)
                st.caption(message.timestamp.strftime("%H:%M:%S"))

# -------------------------
# Predictive Analytics
# -------------------------
with tabs[5]:
    st.subheader("Risk assessment (non-diagnostic)")
    profile, vitals = _state().profile, _state().vitals

    risks = risk_scores(profile, vitals)
    labels = {
        "cardiovascular": "Cardiovascular Disease",
        "diabetes": "Type 2 Diabetes",
        "hypertension": "Hypertension",
        "stroke": "Stroke",
    }
    rdf = pd.DataFrame(
        [{"risk": labels[k], "score": risks[k], "level": risk_level(risks[k])} for k in labels]
    )
    st.dataframe(rdf)

    fig = plt.figure()
    plt.barh(rdf["risk"], rdf["score"])
    plt.xlim(0, 100)
    plt.xlabel("Risk (%)")
    st.pyplot(fig)
    plt.close(fig)

    outlook = predict_outlook(profile, vitals)
    st.write("### Outlook")
    w, m, y = st.columns(3)
    with w:
        st.write("**Next week**")
        for k, v in outlook["next_week"].items():
            st.write(f"- {k.replace('_', ' ').title()}: {v:.0f}%")
    with m:
        st.write("**Next month**")
        month = outlook["next_month"]
        st.write(f"- Weight change: {month['weight_change_kg']:+.1f} kg")
        st.write(f"- Fitness improvement: {month['fitness_improvement']:.0f}%")
        st.write(f"- Health score: {month['health_score']:.0f}")
    with y:
        st.write("**Next year**")
        year = outlook["next_year"]
        if year["biological_age"] is not None:
            st.write(f"- Biological age: {year['biological_age']:.1f}")
        st.write(f"- Longevity score: {year['longevity_score']:.0f}")

    st.write("### Recommendations")
    for section in recommendations():
        with st.expander(section["category"]):
            for item in section["items"]:
                st.write("•", item)

    if high_risk_alert(risks):
        st.error(HIGH_RISK_ALERT)
