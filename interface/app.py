# interface/app.py
"""
Listing Assistant - Main Application

Streamlit interface: a chat tab for the assistant and a catalog manager tab
for uploading a catalog, pasting raw product text and downloading the result.
"""

from datetime import datetime

import streamlit as st

from assistant import handle_request
from assistant.responses import catalog_loaded
from components import (
    queue_prompt,
    render_catalog_preview,
    render_chat_history,
    render_chat_input,
    render_download_button,
    render_file_uploader,
    render_header,
    render_quick_actions,
    render_raw_data_input,
    render_reset_button,
)
from config import setup_logging
from input_readers import read_catalog
from styles import get_custom_css

setup_logging()


def _append_message(role: str, content: str) -> None:
    st.session_state.messages.append(
        {"role": role, "content": content, "timestamp": datetime.now().strftime("%H:%M:%S")}
    )


def _send(message: str) -> None:
    """Send one chat message through the request handler and apply its result."""
    if not message.strip():
        return

    _append_message("user", message)
    result = handle_request(
        {
            "message": message,
            "catalogData": st.session_state.catalog,
            "rawData": st.session_state.raw_data,
        }
    )
    _append_message("assistant", result.response)

    if result.updated_catalog is not None:
        st.session_state.catalog = result.updated_catalog


# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Listing Assistant",
    page_icon="🤖",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# APPLY STYLES
# ============================================================================
st.markdown(get_custom_css(), unsafe_allow_html=True)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "messages" not in st.session_state:
    st.session_state.messages = []
if "catalog" not in st.session_state:
    st.session_state.catalog = []
if "raw_data" not in st.session_state:
    st.session_state.raw_data = ""
if "loaded_file" not in st.session_state:
    st.session_state.loaded_file = None

# ============================================================================
# MAIN APP FLOW
# ============================================================================
render_header()

chat_tab, catalog_tab = st.tabs(["💬 Daily Tasks", "🛒 Catalog Manager"])

with catalog_tab:
    uploaded_file = render_file_uploader()

    # Streamlit reruns the script on every interaction; load each upload once
    if uploaded_file is not None and uploaded_file.file_id != st.session_state.loaded_file:
        try:
            rows = read_catalog(uploaded_file, filename=uploaded_file.name)
        except (ValueError, FileNotFoundError) as e:
            st.error(f"❌ Error: {e}")
        else:
            st.session_state.catalog = rows
            st.session_state.loaded_file = uploaded_file.file_id
            _append_message("assistant", catalog_loaded(len(rows)))

    st.session_state.raw_data = render_raw_data_input(st.session_state.raw_data)

    render_catalog_preview(st.session_state.catalog)
    render_download_button(st.session_state.catalog)

with chat_tab:
    prompt = render_chat_input()
    if prompt:
        _send(prompt)
    render_chat_history(st.session_state.messages)

# ============================================================================
# QUICK ACTIONS
# ============================================================================
st.divider()
quick_prompt = render_quick_actions()
if quick_prompt:
    queue_prompt(st.session_state, quick_prompt)
    st.rerun()

if render_reset_button():
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    st.rerun()
