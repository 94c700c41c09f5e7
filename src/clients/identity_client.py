import logging
from typing import Any, Dict, Optional

import httpx
import streamlit as st

from config.config import SETTINGS
from models.models import Identity

logger = logging.getLogger(__name__)


class IdentityProviderError(Exception):
    """Authentication failure carrying the provider's message."""


@st.cache_resource(show_spinner=False)
def _get_http_client(base_url: str, timeout: float) -> httpx.Client:
    return httpx.Client(base_url=base_url, timeout=timeout)


class IdentityClient:
    """Email/password accounts via the Identity Toolkit REST API, federated
    sign-in via Streamlit's OpenID Connect support."""

    def __init__(
        self,
        api_key: str | None = None,
        federated_provider: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key if api_key is not None else SETTINGS.identity_api_key
        self.federated_provider = federated_provider or SETTINGS.federated_provider
        self.http = http_client or _get_http_client(
            SETTINGS.identity_base_url, SETTINGS.http_timeout_seconds
        )

    def _post(self, action: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self.http.post(
                f"/accounts:{action}", params={"key": self.api_key}, json=payload
            )
        except httpx.HTTPError as e:
            raise IdentityProviderError(str(e)) from e
        try:
            body = response.json()
        except ValueError:
            body = {}
        if response.is_error:
            message = (body.get("error") or {}).get("message") or response.text
            raise IdentityProviderError(message or f"HTTP {response.status_code}")
        return body

    def _to_identity(self, body: Dict[str, Any]) -> Identity:
        return Identity(
            uid=body["localId"],
            email=body.get("email", ""),
            provider="password",
            id_token=body.get("idToken"),
        )

    def sign_up(self, email: str, password: str) -> Identity:
        body = self._post(
            "signUp",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        logger.info(f"User registered: {body.get('localId')}")
        return self._to_identity(body)

    def sign_in(self, email: str, password: str) -> Identity:
        body = self._post(
            "signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        logger.info(f"User logged in: {body.get('localId')}")
        return self._to_identity(body)

    def start_federated_sign_in(self) -> None:
        st.login(self.federated_provider)

    def federated_identity(self) -> Optional[Identity]:
        """The identity of a completed federated sign-in, if any."""
        if not st.user.is_logged_in:
            return None
        return Identity(
            uid=str(st.user.get("sub")),
            email=str(st.user.get("email") or ""),
            provider=self.federated_provider,
        )

    def sign_out(self, identity: Identity | None) -> None:
        if identity and identity.provider != "password":
            st.logout()
