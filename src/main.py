import streamlit as st
from ui.state import ensure_state
from utils.constants import APP_TITLE, Label, Pages
from utils.logging import setup_logging
from utils.styling import load_custom_css
from di.container import Container


def _sign_out(container: Container):
    container.identity_client().sign_out(st.session_state.identity)
    st.session_state.identity = None
    st.session_state.profile = None


def render_user_badge(container: Container):
    identity = st.session_state.identity
    if identity is None:
        return
    profile = st.session_state.profile
    st.sidebar.caption(
        f"Signed in as **{profile.username if profile else identity.email}**"
    )
    st.sidebar.button(
        Label.SIGN_OUT.value, on_click=_sign_out, args=(container,)
    )


def main():
    setup_logging()
    st.set_page_config(page_title=APP_TITLE, page_icon=":material/map:", layout="wide")
    ensure_state()
    load_custom_css()
    container = Container()

    if "next_page" in st.session_state:
        st.session_state.page = st.session_state.pop("next_page")
    elif (
        st.session_state.identity is None
        and container.identity_client().federated_identity() is not None
    ):
        # A federated sign-in returned; finish it on the login page.
        st.session_state.page = Pages.LOGIN.value["key"]

    st.sidebar.title(APP_TITLE)
    selection = st.sidebar.radio(
        "Navigation",
        (
            Pages.MAP.value["key"],
            Pages.LOGIN.value["key"],
        ),
        format_func=lambda x: {
            Pages.MAP.value["key"]: Pages.MAP.value["title"],
            Pages.LOGIN.value["key"]: Pages.LOGIN.value["title"],
        }[x],
        key="page",
        label_visibility="hidden",
    )
    render_user_badge(container)

    if selection == Pages.MAP.value["key"]:
        container.map_page().render()
    elif selection == Pages.LOGIN.value["key"]:
        container.login_page().render()


if __name__ == "__main__":
    main()
