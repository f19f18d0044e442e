"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Dict, Any, List, Optional, Tuple


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Transcript Digest",
        page_icon="🎬",
        layout="wide",
    )

    st.title("🎬 YouTube Transcript Digest")
    st.markdown("Summarize YouTube videos and ask questions about their content.")
    st.info("This tool only works with YouTube videos that have **subtitles/transcripts enabled**.")
    st.divider()


def model_selector(models: List[Dict[str, str]], key: str = "model") -> Optional[str]:
    """
    Display a model picker.

    Args:
        models: List of ``{"id", "name"}`` entries

    Returns:
        Selected model identifier
    """
    if not models:
        return None
    names = {model["id"]: model["name"] for model in models}
    return st.selectbox("Model", options=list(names), format_func=lambda model_id: names[model_id], key=key)


def language_selector() -> str:
    """Display the summary language radio."""
    return st.radio("Summary language", options=["english", "chinese"],
                    format_func=str.capitalize, horizontal=True)


def question_input() -> Tuple[Optional[str], bool]:
    """Display the question form and return the question when submitted."""
    with st.form(key="question_form"):
        question = st.text_input("Ask a question about the video")
        submit = st.form_submit_button("Ask")
    return question, submit


def display_text_result(title: str, text: str, file_name: str):
    """
    Display a summary or answer with a download button.

    Args:
        title: Section heading
        text: Markdown text to display
        file_name: File name for the download
    """
    st.markdown(f"### {title}")
    st.markdown(text)
    st.download_button("Download", data=text, file_name=file_name, mime="text/plain", key=f"download_{file_name}")


def display_video_card(video: Dict[str, Any]) -> bool:
    """
    Display one search result.

    Returns:
        True if the user chose to use this video
    """
    col1, col2 = st.columns([1, 3])
    with col1:
        if video.get("thumbnail_url"):
            st.image(video["thumbnail_url"])
    with col2:
        st.markdown(f"**[{video['title']}]({video['url']})**")
        st.caption(f"{video.get('channel_title', '')} · {(video.get('published_at') or '')[:10]}")
        st.write(video.get("description", ""))
        return st.button("Use this video", key=f"use_{video['id']}")


def display_error(message: str):
    """Display an error message."""
    st.error(message)
