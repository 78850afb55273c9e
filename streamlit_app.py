# streamlit_app.py - "What makes a board game great?" interactive article
import logging

import streamlit as st

from bgg_article import (
    InvalidPreferenceError, PreferenceVector, QuizSession, QuizStage, RecordStore,
    complexity_points, complexity_trend, load_records, mechanics_by_year, query_builder,
    query_quiz_result,
)
from bgg_article.charts import (
    create_complexity_chart, create_mechanics_evolution_chart, create_quiz_results_chart,
)
from bgg_article.config import BUILDER_MECHANICS, DATA_PATH, LOG_LEVEL, TOP_MECHANICS

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")

st.set_page_config(page_title="What Makes a Board Game Great?", page_icon="🎲", layout="wide")

ACCENT = "#ff4d4d"
st.markdown(f"""
<style>
.stApp {{ background-color: #0b0b0b; color: #e8e8e8; }}
h1, h2, h3 {{ color: {ACCENT}; font-family: 'Georgia', serif; }}
.stat-card {{
    background: #161616;
    border-left: 4px solid {ACCENT};
    padding: 1rem;
    border-radius: 8px;
    margin: 0.5rem 0;
}}
</style>
""", unsafe_allow_html=True)

# Quiz questions: (prompt, [(label, value), ...]) in QUIZ_KEYS order
QUIZ_QUESTIONS = [
    ("How long should a game night last?",
     [("Under 30 min", "30"), ("About an hour", "60"), ("An hour and a half", "90"),
      ("Two hours", "120"), ("All evening", "180")]),
    ("How much rules reading can you take?",
     [("Keep it light", "1.5"), ("Some strategy", "2.5"), ("Give me depth", "3.5"),
      ("Brain burner", "4.5")]),
    ("Who do you usually play with?",
     [("Just me", "1"), ("A partner", "2"), ("A small group", "4"), ("A crowd", "6")]),
    ("Pick a mechanic you love",
     [(m, m) for m in TOP_MECHANICS] + [("Surprise me", "any")]),
    ("Old classics or new releases?",
     [("Classics", "1995"), ("2000s favourites", "2005"), ("Modern era", "2015"),
      ("Latest and greatest", "2022")]),
]

STORY_STEPS = {
    "All mechanics": TOP_MECHANICS,
    "Dice Rolling": ["Dice Rolling"],
    "Hand Management": ["Hand Management"],
    "Rising complexity": ["Deck, Bag, and Pool Building", "Cooperative Game", "Area Majority / Influence"],
}


@st.cache_resource(show_spinner=True)
def get_store(path: str) -> RecordStore:
    return load_records(path)


try:
    store = get_store(DATA_PATH)
except (FileNotFoundError, ValueError) as e:
    st.error(f"Failed to load dataset: {e}")
    st.caption("Set BGG_ARTICLE_DATA to the processed games file (JSON, CSV or Parquet).")
    st.stop()

st.title("🎲 What Makes a Board Game Great?")
st.markdown(f"*{len(store):,} games from BoardGameGeek, and what they say about your taste.*")

# -------------------------------
# MECHANICS EVOLUTION
# -------------------------------
st.header("The rise of mechanics")
step = st.radio("Focus", list(STORY_STEPS), horizontal=True)
yearly = mechanics_by_year(store, TOP_MECHANICS)
if yearly.empty:
    st.info("No games with a publication year in this dataset.")
else:
    st.plotly_chart(create_mechanics_evolution_chart(yearly, TOP_MECHANICS, STORY_STEPS[step]),
                    use_container_width=True)

# -------------------------------
# COMPLEXITY VS RATING
# -------------------------------
st.header("Heavier is better?")
c1, c2 = st.columns(2)
show_trend = c1.checkbox("Show trend line", True)
show_recent = c2.checkbox("Highlight recent releases", False)
trend = complexity_trend(store) if show_trend else None
if show_trend and trend is None:
    st.warning("Not enough spread in complexity to draw a trend line.")
st.plotly_chart(create_complexity_chart(complexity_points(store), trend, show_recent),
                use_container_width=True)

# -------------------------------
# BUILDER
# -------------------------------
st.header("🧪 Build a game")
b1, b2, b3 = st.columns(3)
weight = b1.slider("Complexity (weight)", 1.0, 5.0, 2.5, step=0.1)
playtime = b2.slider("Play time (min)", 10, 240, 60, step=5)
mechanic = b3.selectbox("Mechanic", ["all"] + BUILDER_MECHANICS)

builder = query_builder(store, PreferenceVector(weight=weight, playtime=playtime, mechanic=mechanic))
left, right = st.columns([1, 2])
with left:
    if builder.insufficient_data:
        st.metric("Predicted rating", "Not enough data")
    else:
        st.metric("Predicted rating", f"{builder.average_rating:.1f}")
    st.caption(f"{builder.match_count} comparable games")
with right:
    st.markdown("**Top comparable games**")
    for g in builder.top_matches:
        st.markdown(f"- **{g.name}** ({g.year or '—'})")

# -------------------------------
# QUIZ
# -------------------------------
st.header("🎯 Find your game")
if "quiz" not in st.session_state:
    st.session_state.quiz = QuizSession()
quiz: QuizSession = st.session_state.quiz

if quiz.stage is QuizStage.INTRO:
    st.write("Five questions, then we place you on the map.")
    if st.button("Start the quiz"):
        quiz.start()
        st.rerun()

elif quiz.stage is QuizStage.QUESTION:
    prompt, options = QUIZ_QUESTIONS[quiz.question_index]
    st.progress(int(quiz.progress), text=quiz.progress_label)
    st.subheader(prompt)
    cols = st.columns(len(options))
    for i, (label, value) in enumerate(options):
        if cols[i].button(label, key=f"q{quiz.question_index}_{i}"):
            quiz.answer(value)
            st.rerun()

else:
    try:
        prefs = quiz.preferences()
    except InvalidPreferenceError as e:
        st.error(f"Could not read your answers: {e}")
        st.stop()
    result = query_quiz_result(store, prefs)
    st.plotly_chart(create_quiz_results_chart(result), use_container_width=True)

    s1, s2, s3 = st.columns(3)
    rating = result.predicted_rating
    s1.metric("Predicted Rating", f"{rating:.1f}" if rating is not None else "N/A")
    s2.metric("Complexity Percentile",
              f"{round(result.weight_percentile)}%" if result.weight_percentile is not None else "N/A")
    s3.metric("Similar Games", len(result.top_similar))

    st.markdown("**Your best matches**")
    for g in result.best_matches:
        st.markdown(f"- **{g.name}** · {g.year or '—'} · ★ {g.rating:.1f}")

    if st.button("Retake the quiz"):
        quiz.reset()
        st.rerun()

st.caption("Data: BoardGameGeek. Ratings are community averages; weight is the 1–5 complexity vote.")
