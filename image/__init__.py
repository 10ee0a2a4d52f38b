"""Image synthesis and image fetching module."""
from image.models import SynthesisParameters, SynthesisRequest
from image.services import (
    make_http_client,
    fetch_image,
    fetch_images_as_base64,
    synthesize_image,
    to_data_uri
)

__all__ = [
    "SynthesisParameters",
    "SynthesisRequest",
    "make_http_client",
    "fetch_image",
    "fetch_images_as_base64",
    "synthesize_image",
    "to_data_uri"
]
