import logging
from typing import Optional

import streamlit as st

from clients.identity_client import IdentityClient
from models.models import Identity, UserProfile
from ui.net_action import net_action
from ui.Page import Page
from utils.constants import AuthMode, Keys, Label, Pages
from workflows.auth_workflow import (
    FederatedProfileWorkflow,
    RegistrationWorkflow,
    SignInWorkflow,
)

logger = logging.getLogger(__name__)


def _complete_login(identity: Identity, profile: Optional[UserProfile]):
    st.session_state.identity = identity
    st.session_state.profile = profile
    st.session_state.next_page = Pages.MAP.value["key"]


class LoginPage(Page):
    """Email/password sign-in and registration, plus federated sign-in."""

    def __init__(
        self,
        identity_client: IdentityClient,
        registration_workflow: RegistrationWorkflow,
        sign_in_workflow: SignInWorkflow,
        federated_profile_workflow: FederatedProfileWorkflow,
    ):
        self.identity_client = identity_client
        self.registration_workflow = registration_workflow
        self.sign_in_workflow = sign_in_workflow
        self.federated_profile_workflow = federated_profile_workflow

    def _prompt_username(self) -> Optional[str]:
        with st.form("federated_username_form"):
            st.info("Choose a username to finish signing in.")
            username = st.text_input(
                Label.USERNAME.value + Label.MANDATORY_FIELD_MARKER.value,
                key=Keys.FEDERATED_USERNAME.value,
            )
            submitted = st.form_submit_button(Label.SUBMIT_BUTTON.value)
        if submitted and not username.strip():
            st.error(f"{Label.USERNAME.value} is required.")
        return username if submitted else None

    def _finish_federated_login(self, identity: Identity) -> bool:
        profile = self.federated_profile_workflow.run(
            {"identity": identity, "prompt_username": self._prompt_username}
        )
        if profile is None:
            return False
        _complete_login(identity, profile)
        return True

    def _render_credentials_form(self, registering: bool):
        with st.form("auth_form", clear_on_submit=False):
            st.subheader("Create an Account" if registering else "Welcome Back")
            username = (
                st.text_input(Label.USERNAME.value, key=Keys.USERNAME.value)
                if registering
                else ""
            )
            email = st.text_input(Label.EMAIL.value, key=Keys.EMAIL.value)
            password = st.text_input(
                Label.PASSWORD.value, type="password", key=Keys.PASSWORD.value
            )
            submitted = st.form_submit_button(
                Label.SIGN_UP.value if registering else Label.SIGN_IN.value,
                type="primary",
                use_container_width=True,
            )
        if not submitted:
            return

        try:
            with net_action("Signing in..."):
                if registering:
                    identity, profile = self.registration_workflow.run(
                        {"username": username, "email": email, "password": password}
                    )
                else:
                    identity, profile = self.sign_in_workflow.run(
                        {"email": email, "password": password}
                    )
            _complete_login(identity, profile)
            st.rerun()
        except Exception as e:
            logger.error(f"Auth error: {e}")
            st.error(str(e))

    def render(self):
        st.title("Sign in")
        try:
            federated = self.identity_client.federated_identity()
            if federated and st.session_state.identity is None:
                if self._finish_federated_login(federated):
                    st.rerun()
                return

            mode = st.radio(
                "Mode",
                [AuthMode.SIGN_IN.value, AuthMode.REGISTER.value],
                key=Keys.AUTH_MODE.value,
                horizontal=True,
                label_visibility="collapsed",
            )
            self._render_credentials_form(registering=mode == AuthMode.REGISTER.value)

            st.divider()
            if st.button(
                f"Continue with {self.identity_client.federated_provider.title()}",
                use_container_width=True,
            ):
                self.identity_client.start_federated_sign_in()
        except Exception as e:
            st.error(str(e))
