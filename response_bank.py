# response_bank.py
# Canned assistant text + static recommendations (edit copy here, not in chat.py).

GREETING = (
    "Hello! I'm your AI Health Assistant. I can help you understand your health data, "
    "provide personalized recommendations, and answer questions about your Digital Twin. "
    "How can I help you today?"
)

QUICK_QUESTIONS = [
    "How's my heart doing?",
    "What happens if I eat pizza and sleep for 3 hours?",
    "How can I improve my lung health?",
    "What's my current health score?",
]

HEART = {
    "normal": (
        "Your heart is doing great! With a heart rate of {hr} BPM, you're within the normal range. "
        "Your cardiovascular system appears healthy. Keep up with regular exercise and a balanced diet "
        "to maintain this excellent heart health."
    ),
    "high": (
        "Your heart rate is currently elevated at {hr} BPM. This could be due to stress, caffeine, "
        "exercise, or other factors. Consider relaxation techniques like deep breathing or meditation. "
        "If this persists, consult with a healthcare provider."
    ),
    "low": (
        "Your heart rate is {hr} BPM, which is on the lower side. This could be normal if you're very fit, "
        "but if you're experiencing symptoms like dizziness or fatigue, please consult a healthcare professional."
    ),
    "missing": (
        "I don't have your current heart rate data. Please add your vital signs so I can give you "
        "personalized heart health insights!"
    ),
}

PIZZA_SLEEP = """Eating pizza before sleeping for only 3 hours would likely impact your health negatively. Here's what might happen:

🍕 **Digestive Impact**: Heavy, fatty foods like pizza can disrupt sleep quality and cause indigestion.

😴 **Sleep Deprivation**: 3 hours is far below the recommended 7-9 hours, leading to:
- Increased stress hormones
- Weakened immune system
- Poor cognitive function
- Increased appetite the next day

**Better alternatives**:
- Eat lighter meals 2-3 hours before bed
- Aim for 7-9 hours of sleep
- If you must eat late, choose easily digestible foods

Your body deserves better care! 💪"""

LUNG_ADVICE = """Here are evidence-based ways to improve your lung health:

🫁 **Exercise Regularly**:
- Cardio exercises strengthen respiratory muscles
- Swimming is particularly beneficial
- Start with 30 minutes, 3x per week

🌬️ **Breathing Exercises**:
- Practice diaphragmatic breathing
- Try the 4-7-8 technique (inhale 4, hold 7, exhale 8)
- Yoga and meditation help

🏠 **Environment**:
- Keep air clean (air purifiers help)
- Avoid smoking and secondhand smoke
- Add plants to improve air quality

💧 **Stay Hydrated**: Water helps thin mucus in lungs"""

LUNG_SPO2 = "📊 Your current blood oxygen is {spo2:g}%, which is {verdict}!"

SCORE = {
    "header": "📊 **Your Current Health Score: {score}/100**",
    "excellent": "🎉 Excellent health! Keep up the great work!",
    "good": "👍 Good health with room for improvement.",
    "attention": "⚠️ Your health needs attention. Consider consulting healthcare professionals.",
}

# Filler replies when no keyword matches. Each is a callable of (profile, vitals).
FILLERS = [
    lambda profile, vitals: (
        "Based on your current data, I can see that "
        f"{profile.name + ', ' if profile is not None and profile.name else ''}"
        "you're taking great steps towards monitoring your health. "
        + ("Your vital signs show valuable insights about your current wellbeing."
           if vitals is not None else
           "Adding your vital signs would help me provide more personalized advice.")
    ),
    lambda profile, vitals: (
        "That's a great question! With the data I have access to, I can help you understand your "
        "health patterns and provide evidence-based recommendations. "
        + ("" if profile is not None else
           "Setting up your profile would help me give more personalized responses.")
    ).strip(),
    lambda profile, vitals: (
        "I'm here to help you understand your Digital Twin data and provide health insights. "
        + ("Your current health metrics look good overall!"
           if vitals is not None and profile is not None else
           "Complete your profile and add vital signs for detailed analysis.")
    ),
]

RECOMMENDATIONS = [
    {"category": "Immediate Actions", "items": [
        "Monitor blood pressure daily if elevated",
        "Maintain consistent sleep schedule (7-9 hours)",
        "Stay hydrated (2-3L water daily)",
        "Take regular movement breaks",
    ]},
    {"category": "30-Day Goals", "items": [
        "Establish regular exercise routine (150min/week)",
        "Reduce processed food intake by 50%",
        "Practice stress management techniques",
        "Schedule comprehensive health checkup",
    ]},
    {"category": "Long-term Strategy", "items": [
        "Build sustainable healthy habits",
        "Regular health monitoring and tracking",
        "Maintain social connections for mental health",
        "Consider preventive screenings based on age/risk",
    ]},
]

HIGH_RISK_ALERT = (
    "Some of your risk scores are high. Consider consulting with a healthcare professional "
    "for a comprehensive evaluation and personalized care plan."
)
