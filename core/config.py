"""Runtime settings resolved from the environment or Streamlit secrets."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

ROOT_DIR = Path(__file__).resolve().parents[1]

ENV_PREFIX = "BIZDESK_"

DEFAULTS = {
    "preferences_file": "preferences.json",
    "translations_dir": str(ROOT_DIR / "translations"),
    "log_level": "INFO",
}


def _secret(name: str) -> Optional[str]:
    # st.secrets raises when no secrets.toml exists; that just means "unset"
    try:
        if not st.secrets.load_if_toml_exists():
            return None
        value = st.secrets.get(name)
    except (FileNotFoundError, KeyError, StreamlitAPIException):
        return None
    return str(value) if value is not None else None


def get_setting(name: str, default: Optional[str] = None) -> str:
    """Resolve ``name`` from ``BIZDESK_<NAME>``, then secrets, then defaults."""
    env_val = os.environ.get(ENV_PREFIX + name.upper())
    if env_val:
        return env_val
    secret_val = _secret(name)
    if secret_val:
        return secret_val
    if default is not None:
        return default
    return DEFAULTS.get(name, "")


def preferences_file() -> Path:
    return Path(get_setting("preferences_file"))


def translations_dir() -> Path:
    return Path(get_setting("translations_dir"))


def log_level() -> str:
    return get_setting("log_level").upper()
