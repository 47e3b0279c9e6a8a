import logging

import streamlit as st

from core import config
from ui.events import render_events
from ui.topbar import render_topbar

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title="BizDesk", layout="wide")
    tr = render_topbar()

    st.markdown(
        """
        <style>
        @media (max-width: 600px) {
            div[class^='stColumn'] {flex: 1 1 100% !important;}
        }
        input, select {width: 100% !important;}
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.title(tr.t("events.title"))
    render_events(tr)


if __name__ == "__main__":
    main()
