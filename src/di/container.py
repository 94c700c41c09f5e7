from dependency_injector import containers, providers
from clients.geocoding_client import GeocodingClient
from clients.identity_client import IdentityClient
from clients.persistence_client import PersistenceClient
from clients.s3_client import S3Client
from ui.login_page import LoginPage
from ui.map_page import MapPage
from ui.marker_detail import MarkerDetail
from ui.marker_form import MarkerForm
from ui.search_bar import SearchBar
from workflows.auth_workflow import (
    FederatedProfileWorkflow,
    RegistrationWorkflow,
    SignInWorkflow,
)
from workflows.marker_creation_workflow import MarkerCreationWorkflow
from workflows.review_workflow import ReviewWorkflow


class Container(containers.DeclarativeContainer):
    # Clients
    geocoding_client = providers.Singleton(GeocodingClient)
    persistence_client = providers.Singleton(PersistenceClient)
    s3_client = providers.Singleton(S3Client)
    identity_client = providers.Singleton(IdentityClient)

    # Workflows
    marker_creation_workflow = providers.Singleton(
        MarkerCreationWorkflow,
        persistence_client=persistence_client,
        s3_client=s3_client,
    )
    review_workflow = providers.Singleton(
        ReviewWorkflow, persistence_client=persistence_client
    )
    registration_workflow = providers.Singleton(
        RegistrationWorkflow,
        identity_client=identity_client,
        persistence_client=persistence_client,
    )
    sign_in_workflow = providers.Singleton(
        SignInWorkflow,
        identity_client=identity_client,
        persistence_client=persistence_client,
    )
    federated_profile_workflow = providers.Singleton(
        FederatedProfileWorkflow, persistence_client=persistence_client
    )

    # UI Components
    search_bar = providers.Singleton(SearchBar, geocoding_client=geocoding_client)
    marker_form = providers.Singleton(
        MarkerForm, marker_creation_workflow=marker_creation_workflow
    )
    marker_detail = providers.Singleton(MarkerDetail, review_workflow=review_workflow)

    # UI Pages
    map_page = providers.Singleton(
        MapPage,
        persistence_client=persistence_client,
        search_bar=search_bar,
        marker_form=marker_form,
        marker_detail=marker_detail,
    )
    login_page = providers.Singleton(
        LoginPage,
        identity_client=identity_client,
        registration_workflow=registration_workflow,
        sign_in_workflow=sign_in_workflow,
        federated_profile_workflow=federated_profile_workflow,
    )
