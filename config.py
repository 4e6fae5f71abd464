# config.py
import os
import logging

APP_TITLE = os.getenv("APP_TITLE", "Vision Mines")

DASH_HOST = os.getenv("DASH_HOST", "0.0.0.0")
DASH_PORT = int(os.getenv("DASH_PORT", "8050"))
DASH_DEBUG = os.getenv("DASH_DEBUG", "0").lower() in {"1", "true", "yes"}

STREAMLIT_HOST = os.getenv("STREAMLIT_HOST", "127.0.0.1")
STREAMLIT_PORT = int(os.getenv("STREAMLIT_PORT", "8501"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Delay before a submitted form returns to its blank state
FORM_RESET_SECONDS = float(os.getenv("FORM_RESET_SECONDS", "3"))

_seed = os.getenv("ROSTER_SEED", "").strip()
ROSTER_SEED = int(_seed) if _seed else None


def configure_logging(level=None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
