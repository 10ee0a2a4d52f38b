"""Vision-language service client using Gemini."""
import base64
from typing import List, Optional

from google import genai
from google.genai import types

from config import Config
from common.exceptions import UpstreamError, ValidationError
from common.models import ImageInput
from utils.logger import get_logger

logger = get_logger("gemini_service")


def get_client() -> genai.Client:
    """Build a Gemini client; raises ConfigurationError when the key is unset."""
    return genai.Client(api_key=Config.get_gemini_api_key())


def build_image_parts(input_images: List[ImageInput]) -> List[types.Part]:
    """
    Convert base64 image inputs into Gemini inline-data parts.

    Raises:
        ValidationError: if an image is not valid base64
    """
    parts = []
    for img in input_images:
        try:
            image_bytes = base64.b64decode(img.data, validate=True)
        except ValueError as e:
            raise ValidationError(f"Invalid base64 image data: {e}")
        parts.append(types.Part(
            inline_data=types.Blob(mime_type=img.mime_type, data=image_bytes)
        ))
        logger.debug(f"Added input image: {img.mime_type} ({len(image_bytes)} bytes)")
    return parts


def _as_upstream_error(e: Exception) -> UpstreamError:
    error_msg = str(e).lower()
    if "rate" in error_msg or "quota" in error_msg:
        detail = f"Gemini rate limit exceeded: {e}"
    elif "timeout" in error_msg:
        detail = f"Gemini timeout: {e}"
    else:
        detail = f"Gemini error: {e}"
    return UpstreamError(detail)


def _response_text(response) -> str:
    text = getattr(response, "text", None) or ""
    if not text.strip():
        raise UpstreamError("No content was generated by Gemini")
    usage = getattr(response, "usage_metadata", None)
    if usage:
        prompt_tokens = getattr(usage, "prompt_token_count", 0) or 0
        completion_tokens = getattr(usage, "candidates_token_count", 0) or 0
        logger.info(f"Usage: {prompt_tokens} prompt + {completion_tokens} completion tokens")
    return text


def generate_text(contents: List[str], model: Optional[str] = None) -> str:
    """
    Text-only generation.

    Args:
        contents: Ordered text parts, e.g. [system_prompt, question]
        model: Override for Config.GEMINI_TEXT_MODEL

    Returns:
        The raw response text

    Raises:
        ConfigurationError: GEMINI_API_KEY is unset
        UpstreamError: the call failed or returned nothing
    """
    client = get_client()
    model = model or Config.GEMINI_TEXT_MODEL
    logger.info(f"Requesting text from Gemini model: {model} ({len(contents)} parts)")
    try:
        response = client.models.generate_content(model=model, contents=contents)
    except Exception as e:
        logger.error(f"Gemini text generation failed: {e}")
        raise _as_upstream_error(e)
    return _response_text(response)


async def analyze_images(
    input_images: List[ImageInput],
    prompt: str,
    model: Optional[str] = None
) -> str:
    """
    Image-conditioned generation: images first, then the instruction prompt.

    Raises:
        ConfigurationError: GEMINI_API_KEY is unset
        ValidationError: an image payload is not valid base64
        UpstreamError: the call failed or returned nothing
    """
    client = get_client()
    model = model or Config.GEMINI_TEXT_MODEL
    parts = build_image_parts(input_images)
    parts.append(types.Part.from_text(text=prompt))
    contents = [types.Content(role="user", parts=parts)]

    logger.info(f"Requesting image analysis from Gemini model: {model} ({len(input_images)} images)")
    try:
        response = await client.aio.models.generate_content(model=model, contents=contents)
    except Exception as e:
        logger.error(f"Gemini image analysis failed: {e}")
        raise _as_upstream_error(e)
    return _response_text(response)
