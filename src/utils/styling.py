import streamlit as st

APP_CUSTOM_CSS = """
<style>
section[data-testid="stSidebar"] {
    min-width: 220px;
    width: fit-content;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"] {
    font-size: 16px;
    font-weight: 500;
    padding: 10px 8px;
    border-radius: 8px;
    margin-bottom: 4px;
    width: 100%;
    display: block;
    box-sizing: border-box;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] label[data-baseweb="radio"] > div:first-child {
    display: none;
}

/* Map iframe fills its column */
iframe[title="streamlit_folium.st_folium"] {
    border-radius: 8px;
    box-shadow: 0 2px 8px rgba(0, 0, 0, 0.15);
}
</style>
"""

SIDEBAR_HIGHLIGHT_CSS = """
<style>
section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"]:has(input:checked) {{
    background: {background};
    color: {color} !important;
}}
</style>
"""


def load_custom_css():
    st.markdown(APP_CUSTOM_CSS, unsafe_allow_html=True)
    if st.context.theme.type == "dark":
        highlight = SIDEBAR_HIGHLIGHT_CSS.format(background="#0e1117", color="#fff")
    else:
        highlight = SIDEBAR_HIGHLIGHT_CSS.format(background="#dbe7ff", color="#1d4ed8")
    st.markdown(highlight, unsafe_allow_html=True)
