"""Application ports."""

from composer.application.ports.backend import CategoriesApiPort, PostsApiPort
from composer.application.ports.credentials import CredentialStore
from composer.application.ports.notifier import NotifierPort
from composer.application.ports.place_search import PlaceSearchPort, PlaceSuggestion
from composer.application.ports.relay import MediaRelayPort, RelayResponse, RelayTransportError
from composer.application.ports.text_generation import TextGenerationPort

__all__ = [
    "CategoriesApiPort",
    "CredentialStore",
    "MediaRelayPort",
    "NotifierPort",
    "PlaceSearchPort",
    "PlaceSuggestion",
    "PostsApiPort",
    "RelayResponse",
    "RelayTransportError",
    "TextGenerationPort",
]
