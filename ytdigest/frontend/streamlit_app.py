"""
Main Streamlit application for the YouTube transcript digest.
"""

import os
import streamlit as st
from dotenv import load_dotenv

from ytdigest.frontend.api_client import ApiClient, ApiError
from ytdigest.frontend.components import (
    header, model_selector, language_selector, question_input,
    display_text_result, display_video_card, display_error,
)


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "api_client" not in st.session_state:
        st.session_state.api_client = ApiClient(os.getenv("API_URL", "http://localhost:8000"))

    for key in ("url", "summary", "answer", "error", "search_error"):
        if key not in st.session_state:
            st.session_state[key] = ""

    if "search_results" not in st.session_state:
        st.session_state.search_results = []


def run_action(action, result_key: str, error_key: str = "error"):
    """
    Run an API call and store its result.

    On failure the error is recorded and the previous result stays visible.
    """
    st.session_state[error_key] = ""
    try:
        st.session_state[result_key] = action()
    except ApiError as e:
        st.session_state[error_key] = e.message
    except Exception as e:
        st.session_state[error_key] = f"An error occurred: {e}"


def video_view(client: ApiClient, models):
    """Summarize and ask questions about one video."""
    # A search result picked on the previous run pre-fills the URL
    if "pending_url" in st.session_state:
        st.session_state.url = st.session_state.pop("pending_url")

    url = st.text_input("YouTube URL", key="url", placeholder="https://www.youtube.com/watch?v=VIDEO_ID")
    model = model_selector(models)
    language = language_selector()

    if st.button("Summarize"):
        if not url.strip():
            st.session_state.error = "Please enter a YouTube URL"
        else:
            with st.spinner("Fetching transcript and summarizing..."):
                run_action(lambda: client.summarize_video(url, language, model)["summary"], "summary")

    question, asked = question_input()
    if asked:
        if not url.strip() or not question.strip():
            st.session_state.error = "Please enter a YouTube URL and question"
        else:
            with st.spinner("Answering..."):
                run_action(lambda: client.ask_question(url, question, model)["answer"], "answer")

    if st.session_state.error:
        display_error(st.session_state.error)
    if st.session_state.summary:
        display_text_result("Summary", st.session_state.summary, "summary.txt")
    if st.session_state.answer:
        display_text_result("Answer", st.session_state.answer, "answer.txt")


def search_view(client: ApiClient):
    """Search YouTube for videos with captions."""
    with st.form(key="search_form"):
        query = st.text_input("Search videos with captions")
        submitted = st.form_submit_button("Search")

    if submitted and query.strip():
        with st.spinner("Searching..."):
            run_action(lambda: client.search_videos(query), "search_results", "search_error")
        if not st.session_state.search_error and not st.session_state.search_results:
            st.session_state.search_error = "No videos with transcripts found for your search. Try different keywords."

    if st.session_state.search_error:
        display_error(st.session_state.search_error)

    for video in st.session_state.search_results:
        if display_video_card(video):
            st.session_state.pending_url = video["url"]
            st.rerun()


def main():
    """Main application entry point."""
    header()
    init_session_state()

    client = st.session_state.api_client
    try:
        models = client.list_models()
    except (ApiError, OSError):
        models = []

    video_tab, search_tab = st.tabs(["Summarize & Ask", "Search"])
    with video_tab:
        video_view(client, models)
    with search_tab:
        search_view(client)


if __name__ == "__main__":
    main()
