import os
import streamlit as st


def load_env_vars():
    # Nested tables such as [auth] are read by Streamlit itself.
    if not st.secrets.load_if_toml_exists():
        return
    for k, v in st.secrets.items():
        if isinstance(v, str):
            os.environ.setdefault(k, v)
