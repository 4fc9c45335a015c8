# src/code_review/client/app.py
# Run with: streamlit run src/code_review/client/app.py
import streamlit as st

from code_review.client.api import ReviewClient
from code_review.client.state import LANGUAGES, ReviewSession, severity_class
from code_review.config import get_settings


SEVERITY_COLORS = {
    "good": "#4CAF50",
    "warning": "#FFC107",
    "bad": "#F44336",
}


def get_session() -> ReviewSession:
    if "session" not in st.session_state:
        st.session_state.session = ReviewSession()
    return st.session_state.session


def load_history(session: ReviewSession, index: int) -> None:
    session.load_history(index)
    st.session_state.code_input = session.code


def render_metric_card(title: str, score: float) -> None:
    color = SEVERITY_COLORS[severity_class(score)]
    with st.container(border=True):
        st.markdown(
            f"**{title}** <span style='float:right;font-size:1.5em;font-weight:bold;color:{color}'>{score:g}/10</span>",
            unsafe_allow_html=True,
        )
        st.progress(min(max(int(score * 10), 0), 100))


def render_review(session: ReviewSession) -> None:
    review = session.review

    overall, complexity, performance = st.columns(3)
    with overall:
        render_metric_card("Overall Quality", review.score)
    with complexity:
        render_metric_card("Complexity", review.complexity.score)
    with performance:
        render_metric_card("Performance", review.performance.score)

    suggestions_tab, security_tab, practices_tab, history_tab = st.tabs([
        f"Suggestions ({len(review.suggestions)})",
        f"Security ({len(review.security)})",
        "Best Practices",
        f"History ({len(session.history)})",
    ])

    with suggestions_tab:
        for suggestion in review.suggestions:
            st.markdown(f"💡 {suggestion}")

    with security_tab:
        for issue in review.security:
            st.markdown(f"🛡️ {issue}")

    with practices_tab:
        st.text(review.best_practices)

    with history_tab:
        for index, item in enumerate(session.history):
            with st.container(border=True):
                left, right = st.columns([3, 1])
                left.caption(item.timestamp.strftime("%c"))
                right.markdown(f"`Score: {item.review.score:g}/10`")
                st.code(f"{item.code[:200]}...")
                st.button(
                    "Load This Code",
                    key=f"history_{index}_{item.timestamp.timestamp()}",
                    on_click=load_history,
                    args=(session, index),
                )


def main():
    st.set_page_config(page_title="AI Code Quality Reviewer", layout="wide")
    session = get_session()
    client = ReviewClient(api_url=get_settings().review_api_url)

    header, selector = st.columns([3, 1])
    with header:
        st.title("AI Code Quality Reviewer")
        st.caption("Get AI-powered analysis and suggestions for your code")
    with selector:
        session.language = st.selectbox(
            "Language",
            options=list(LANGUAGES),
            index=list(LANGUAGES).index(session.language),
            format_func=LANGUAGES.get,
        )

    session.code = st.text_area(
        "Code",
        key="code_input",
        height=240,
        placeholder="Paste your code here...",
    )

    if st.button("Analyze Code", type="primary", disabled=session.loading, use_container_width=True):
        with st.spinner("Analyzing..."):
            session.submit(client)

    if session.error:
        st.error(session.error, icon="🚨")

    if session.review:
        render_review(session)


main()
