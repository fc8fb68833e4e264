"""Custom CSS for the Streamlit interface."""


def get_custom_css() -> str:
    return """
    <style>
    .main-title {
        text-align: center;
        font-size: 3.5rem;
        font-weight: 700;
        color: #00d4ff;
        text-shadow: 0 0 12px rgba(0, 212, 255, 0.6);
        margin-bottom: 0.2rem;
    }
    .main-subtitle {
        text-align: center;
        color: #9ca3af;
        margin-bottom: 1.5rem;
    }
    .quick-action-hint {
        font-size: 0.85rem;
        color: #9ca3af;
    }
    </style>
    """
