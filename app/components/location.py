"""Streamlit query parameters as the synchronizer's location."""

from typing import Dict, List

import streamlit as st

from config.constants import SCOPE_PARAM


class StreamlitLocation:
    """Location backed by ``st.query_params``.

    Streamlit updates the browser URL in place, so writes do not add a
    history entry.
    """

    def read(self) -> Dict[str, List[str]]:
        return {key: list(st.query_params.get_all(key)) for key in st.query_params.keys()}

    def replace(self, params: Dict[str, List[str]]) -> None:
        st.query_params.from_dict(params)


def get_active_tab(default: str) -> str:
    """The tab named in the URL, or default."""
    return st.query_params.get(SCOPE_PARAM, default)


def set_active_tab(tab: str) -> None:
    """Switch tabs, keeping every other parameter (filters included)."""
    st.query_params[SCOPE_PARAM] = tab
