import logging
from typing import Callable, Dict, Optional, Tuple

from clients.identity_client import IdentityClient
from clients.persistence_client import PersistenceClient
from models.models import Identity, UserProfile
from utils.constants import Label
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


def _require(payload: Dict, *fields: Label) -> Tuple[str, ...]:
    if not isinstance(payload, dict):
        raise ValueError("Input must be a dict")
    values = []
    for field in fields:
        key = field.name.lower()
        value = (payload.get(key) or "").strip()
        if not value:
            raise ValueError(f"{field.value} is required")
        values.append(value)
    return tuple(values)


class RegistrationWorkflow(Workflow):
    """Create an identity and its profile document."""

    def __init__(
        self, identity_client: IdentityClient, persistence_client: PersistenceClient
    ):
        self.identity_client = identity_client
        self.persistence_client = persistence_client

    def run(self, input: Dict) -> Tuple[Identity, UserProfile]:
        username, email, password = _require(
            input, Label.USERNAME, Label.EMAIL, Label.PASSWORD
        )
        identity = self.identity_client.sign_up(email, password)
        profile = self.persistence_client.create_profile(
            identity.uid, username, identity.email or email
        )
        return identity, profile


class SignInWorkflow(Workflow):
    def __init__(
        self, identity_client: IdentityClient, persistence_client: PersistenceClient
    ):
        self.identity_client = identity_client
        self.persistence_client = persistence_client

    def run(self, input: Dict) -> Tuple[Identity, Optional[UserProfile]]:
        email, password = _require(input, Label.EMAIL, Label.PASSWORD)
        identity = self.identity_client.sign_in(email, password)
        return identity, self.persistence_client.get_profile(identity.uid)


class FederatedProfileWorkflow(Workflow):
    """Finish a federated sign-in, asking for a username when the identity
    has no profile yet.

    `prompt_username` is called at most once per run and returns the chosen
    username, or None while the user has not answered.
    """

    def __init__(self, persistence_client: PersistenceClient):
        self.persistence_client = persistence_client

    def run(self, input: Dict) -> Optional[UserProfile]:
        if not isinstance(input, dict):
            raise ValueError("Input must be a dict")
        identity = input.get("identity")
        if not isinstance(identity, Identity):
            raise ValueError("identity is required")
        prompt_username: Callable[[], Optional[str]] = input.get("prompt_username")
        if not callable(prompt_username):
            raise ValueError("prompt_username is required")

        profile = self.persistence_client.get_profile(identity.uid)
        if profile:
            return profile

        username = (prompt_username() or "").strip()
        if not username:
            return None
        logger.info(f"First federated login for {identity.uid}")
        return self.persistence_client.create_profile(
            identity.uid, username, identity.email
        )
