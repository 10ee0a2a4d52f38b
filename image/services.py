"""Image services - Hugging Face synthesis and parent photo download."""
import asyncio
import base64
from typing import List, Optional

import httpx

from config import Config
from common.exceptions import UpstreamError
from common.models import ImageInput
from image.models import SynthesisParameters, SynthesisRequest
from utils.logger import get_logger

logger = get_logger("image.services")

DEFAULT_MIME_TYPE = "image/jpeg"


def make_http_client() -> httpx.AsyncClient:
    """Outbound HTTP client shared by one request's upstream calls."""
    return httpx.AsyncClient(timeout=Config.HTTP_TIMEOUT_SECONDS, follow_redirects=True)


def to_data_uri(data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    """Encode raw image bytes as a base64 data URI."""
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('utf-8')}"


async def fetch_image(client: httpx.AsyncClient, url: str) -> bytes:
    """Download one image; any non-2xx status raises UpstreamError."""
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        raise UpstreamError(f"Failed to fetch image {url}: {e}")
    if not response.is_success:
        raise UpstreamError(
            f"Failed to fetch image {url}: {response.status_code}",
            upstream_status=response.status_code,
        )
    logger.debug(f"Fetched image {url} ({len(response.content)} bytes)")
    return response.content


async def fetch_images_as_base64(
    urls: List[str],
    client: Optional[httpx.AsyncClient] = None
) -> List[ImageInput]:
    """
    Fetch all images concurrently and base64-encode them.

    All-or-nothing: the first failure propagates and the caller does not
    learn which URL failed.
    """
    owns_client = client is None
    client = client or make_http_client()
    try:
        payloads = await asyncio.gather(*(fetch_image(client, url) for url in urls))
    finally:
        if owns_client:
            await client.aclose()
    return [
        ImageInput(mime_type=DEFAULT_MIME_TYPE, data=base64.b64encode(p).decode("utf-8"))
        for p in payloads
    ]


async def synthesize_image(
    prompt: str,
    parameters: Optional[SynthesisParameters] = None,
    client: Optional[httpx.AsyncClient] = None
) -> bytes:
    """
    Call the Hugging Face inference API and return raw image bytes.

    Raises:
        ConfigurationError: HUGGINGFACE_API_KEY is unset
        UpstreamError: non-2xx response (status and body attached) or network failure
    """
    api_key = Config.get_huggingface_api_key()
    body = SynthesisRequest(inputs=prompt, parameters=parameters or SynthesisParameters())
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    owns_client = client is None
    client = client or make_http_client()
    logger.info(f"Requesting image synthesis from {Config.HUGGINGFACE_MODEL_URL}")
    try:
        response = await client.post(Config.HUGGINGFACE_MODEL_URL, json=body.model_dump(), headers=headers)
    except httpx.HTTPError as e:
        logger.error(f"Hugging Face request failed: {e}")
        raise UpstreamError(f"Hugging Face request failed: {e}")
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        error_text = response.text
        logger.error(f"Hugging Face API error: {response.status_code} {error_text}")
        message = f"Failed to generate image: {response.status_code} - {error_text}"
        raise UpstreamError(
            message,
            upstream_status=response.status_code,
            upstream_body=error_text,
            public_message=message,
        )

    logger.info(f"Received synthesized image ({len(response.content)} bytes)")
    return response.content
