import pytest
from unittest.mock import MagicMock

from clients.identity_client import IdentityProviderError
from models.models import Identity, UserProfile
from workflows.auth_workflow import (
    FederatedProfileWorkflow,
    RegistrationWorkflow,
    SignInWorkflow,
)


@pytest.fixture
def identity_client():
    client = MagicMock()
    client.sign_up.return_value = Identity(uid="uid-1", email="a@example.com")
    client.sign_in.return_value = Identity(uid="uid-1", email="a@example.com")
    return client


@pytest.fixture
def persistence():
    client = MagicMock()
    client.create_profile.side_effect = lambda uid, username, email: UserProfile(
        uid=uid, username=username, email=email
    )
    return client


def test_registration_creates_identity_and_profile(identity_client, persistence):
    identity, profile = RegistrationWorkflow(identity_client, persistence).run(
        {"username": "skipper", "email": "a@example.com", "password": "secret123"}
    )

    identity_client.sign_up.assert_called_once_with("a@example.com", "secret123")
    persistence.create_profile.assert_called_once_with(
        "uid-1", "skipper", "a@example.com"
    )
    assert identity.uid == profile.uid == "uid-1"


@pytest.mark.parametrize("missing", ["username", "email", "password"])
def test_registration_requires_all_fields(identity_client, persistence, missing):
    data = {"username": "skipper", "email": "a@example.com", "password": "pw1234"}
    data[missing] = ""
    with pytest.raises(ValueError, match="is required"):
        RegistrationWorkflow(identity_client, persistence).run(data)
    identity_client.sign_up.assert_not_called()


def test_registration_failure_skips_profile(identity_client, persistence):
    identity_client.sign_up.side_effect = IdentityProviderError("EMAIL_EXISTS")
    with pytest.raises(IdentityProviderError, match="EMAIL_EXISTS"):
        RegistrationWorkflow(identity_client, persistence).run(
            {"username": "skipper", "email": "a@example.com", "password": "pw1234"}
        )
    persistence.create_profile.assert_not_called()


def test_sign_in_needs_only_email_and_password(identity_client, persistence):
    persistence.get_profile.return_value = UserProfile(uid="uid-1", username="skipper")

    identity, profile = SignInWorkflow(identity_client, persistence).run(
        {"email": "a@example.com", "password": "pw1234"}
    )

    assert identity.uid == "uid-1"
    assert profile.username == "skipper"


def test_federated_sign_in_without_profile_prompts_exactly_once(persistence):
    persistence.get_profile.return_value = None
    prompt = MagicMock(return_value="bayman")
    identity = Identity(uid="google-42", email="g@example.com", provider="google")

    profile = FederatedProfileWorkflow(persistence).run(
        {"identity": identity, "prompt_username": prompt}
    )

    prompt.assert_called_once_with()
    persistence.create_profile.assert_called_once_with(
        "google-42", "bayman", "g@example.com"
    )
    assert profile.username == "bayman"


def test_federated_sign_in_with_profile_does_not_prompt(persistence):
    persistence.get_profile.return_value = UserProfile(uid="google-42", username="bayman")
    prompt = MagicMock()

    profile = FederatedProfileWorkflow(persistence).run(
        {"identity": Identity(uid="google-42", provider="google"), "prompt_username": prompt}
    )

    prompt.assert_not_called()
    persistence.create_profile.assert_not_called()
    assert profile.username == "bayman"


def test_federated_sign_in_waits_for_an_answer(persistence):
    persistence.get_profile.return_value = None
    prompt = MagicMock(return_value=None)

    profile = FederatedProfileWorkflow(persistence).run(
        {"identity": Identity(uid="google-42", provider="google"), "prompt_username": prompt}
    )

    assert profile is None
    prompt.assert_called_once_with()
    persistence.create_profile.assert_not_called()


@pytest.mark.parametrize(
    "data",
    [
        None,
        {"prompt_username": lambda: "bayman"},
        {"identity": Identity(uid="google-42", provider="google")},
        {"identity": Identity(uid="google-42", provider="google"), "prompt_username": "bayman"},
    ],
)
def test_federated_input_is_validated(persistence, data):
    with pytest.raises(ValueError, match="must be a dict|is required"):
        FederatedProfileWorkflow(persistence).run(data)
    persistence.get_profile.assert_not_called()
