"""Client pages for the pet management app."""
from frontend.api_client import ApiError, ClientSession, PetApiClient
from frontend.generate_page import GeneratePage, PageState

__all__ = [
    "ApiError",
    "ClientSession",
    "PetApiClient",
    "GeneratePage",
    "PageState"
]
