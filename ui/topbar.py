import streamlit as st
from core import config
from core.i18n import Translator, load_catalog
from core.state import JsonPreferenceStore
from core.version import __version__


def get_translator() -> Translator:
    """Return the session's translator, creating it on first use."""
    if "translator" not in st.session_state:
        store = JsonPreferenceStore(str(config.preferences_file()))
        st.session_state["translator"] = Translator(load_catalog(), store)
    return st.session_state["translator"]


def _on_language_change() -> None:
    get_translator().set_language(st.session_state["ui_lang"])


def render_topbar() -> Translator:
    """Render the sticky top bar with the language picker and return the translator."""
    tr = get_translator()
    st.markdown(
        """
        <style>
        .bizdesk-topbar {position:sticky; top:0; background-color:white; z-index:100; padding:4px 8px; border-bottom:1px solid #ddd;}
        .bizdesk-topbar div[data-testid="stHorizontalBlock"] {align-items:center;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    with st.container():
        st.markdown('<div class="bizdesk-topbar">', unsafe_allow_html=True)
        left, right = st.columns([3, 1])
        with left:
            st.markdown(f"**{tr.t('app.title')} v{__version__}**")
            st.caption(tr.t("app.caption"))
        with right:
            languages = dict(tr.available_languages())
            codes = list(languages)
            st.selectbox(
                tr.t("app.language"),
                codes,
                index=codes.index(tr.language),
                format_func=lambda code: languages[code],
                key="ui_lang",
                on_change=_on_language_change,
            )
        st.markdown("</div>", unsafe_allow_html=True)
    return tr
