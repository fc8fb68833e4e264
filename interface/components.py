"""
Reusable Streamlit widgets for the assistant UI.

Each render_* function draws one section and returns whatever the caller
needs to act on (submitted text, uploaded file, button clicks).
"""

from __future__ import annotations

from typing import List, MutableMapping, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st

from config.settings import ASSISTANT_NAME, CATALOG_PREVIEW_ROWS
from domain.catalog import CatalogRow
from writers import catalog_filename, catalog_to_xlsx_bytes

QUICK_ACTIONS: Tuple[Tuple[str, str, str], ...] = (
    ("Today's Tasks", "View daily schedule", "What tasks do I have for today?"),
    ("Prepare Listings", "Format catalog data", "Help me prepare product listings"),
    ("Platform Rules", "E-commerce guidelines", "Show me Amazon listing requirements"),
    ("Data Check", "Find missing fields", "Analyze my catalog for missing data"),
)


def render_header() -> None:
    dotted = ".".join(ASSISTANT_NAME.upper())
    st.markdown(f'<div class="main-title">{dotted}</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="main-subtitle">Your personal AI assistant for daily tasks and e-commerce management</div>',
        unsafe_allow_html=True,
    )


def render_chat_history(messages: Sequence[dict]) -> None:
    if not messages:
        st.info("Start a conversation: type your request below or pick a quick action.")
    for msg in messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])
            st.caption(msg["timestamp"])


CHAT_DRAFT_KEY = "chat_draft"
PENDING_PROMPT_KEY = "pending_prompt"


def queue_prompt(state: MutableMapping, prompt: str) -> None:
    """Remember a quick-action prompt; it lands in the chat box on the next run."""
    state[PENDING_PROMPT_KEY] = prompt


def apply_pending_prompt(state: MutableMapping) -> Optional[str]:
    """Move a queued prompt into the chat box draft. Must run before the chat box is drawn."""
    prompt = state.pop(PENDING_PROMPT_KEY, None)
    if prompt is not None:
        state[CHAT_DRAFT_KEY] = prompt
    return prompt


def render_chat_input() -> Optional[str]:
    """Draw the chat box; return the submitted text, or None when nothing was sent."""
    apply_pending_prompt(st.session_state)
    with st.form("chat_form", clear_on_submit=True):
        text = st.text_input(
            "Message",
            key=CHAT_DRAFT_KEY,
            placeholder="Type your request...",
            label_visibility="collapsed",
        )
        sent = st.form_submit_button("Send", type="primary")
    if sent and text.strip():
        return text
    return None


def render_file_uploader():
    return st.file_uploader(
        "📁 Upload catalog (Excel/CSV)",
        type=["xlsx", "xlsm", "csv"],
        help="Row 1 must contain the column headers",
    )


def render_raw_data_input(current: str) -> str:
    return st.text_area(
        "Raw product data",
        value=current,
        height=160,
        placeholder=(
            "Paste your raw product data here... I'll help you format it for "
            "Amazon, Flipkart, Meesho, and Myntra listings."
        ),
    )


def render_catalog_preview(catalog: List[CatalogRow]) -> None:
    if not catalog:
        st.markdown("### 📦 No catalog loaded")
        st.caption("Upload a catalog file to get started")
        return

    # First row's keys are the display schema
    columns = list(catalog[0].keys())
    preview = pd.DataFrame(catalog[:CATALOG_PREVIEW_ROWS]).reindex(columns=columns)
    st.dataframe(preview, hide_index=True, width="stretch")

    if len(catalog) > CATALOG_PREVIEW_ROWS:
        st.caption(f"Showing {CATALOG_PREVIEW_ROWS} of {len(catalog)} items")


def render_download_button(catalog: List[CatalogRow]) -> None:
    st.download_button(
        label="📥 Download Catalog",
        data=catalog_to_xlsx_bytes(catalog),
        file_name=catalog_filename(),
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        type="primary",
        disabled=not catalog,
        width="stretch",
        key="download_catalog",
    )


def render_quick_actions() -> Optional[str]:
    """Return the prompt of the clicked quick action, if any."""
    clicked = None
    cols = st.columns(len(QUICK_ACTIONS))
    for col, (title, hint, prompt) in zip(cols, QUICK_ACTIONS):
        with col:
            if st.button(title, key=f"quick_{title}", width="stretch"):
                clicked = prompt
            st.markdown(f'<div class="quick-action-hint">{hint}</div>', unsafe_allow_html=True)
    return clicked


def render_reset_button() -> bool:
    return st.button("🔄 Start Over", type="secondary")
