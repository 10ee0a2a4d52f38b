"""Pet AI services - advisor chat and child-image generation."""
from typing import Optional

from common import gemini_service
from common.exceptions import (
    ChatFailedError,
    ConfigurationError,
    ImageGenerationError,
    UpstreamError
)
from image import services as image_services
from pets.analysis import ChildDescriptionParser, default_parser
from pets.models import ChatRequest, ChildGenerationRequest, Pet
from pets.prompts import (
    build_analysis_prompt,
    build_breed_prompt,
    build_chat_question,
    build_chat_system_prompt,
    build_described_prompt
)
from utils.logger import get_logger

logger = get_logger("pets.services")


def answer_pet_question(req: ChatRequest) -> str:
    """
    Ask the advisor model a question about one pet.

    Raises:
        ConfigurationError: GEMINI_API_KEY is unset
        ChatFailedError: anything went wrong downstream
    """
    system_prompt = build_chat_system_prompt(req.pet_info)
    try:
        return gemini_service.generate_text([system_prompt, build_chat_question(req.message)])
    except ConfigurationError:
        raise
    except Exception as e:
        logger.error(f"Chat error: {e}")
        raise ChatFailedError(str(e))


async def describe_child(
    parent1: Pet,
    parent2: Pet,
    parser: ChildDescriptionParser = default_parser
) -> Optional[str]:
    """
    Ask the vision model to imagine the child from both parent photos.

    Returns the parsed description, or None when the answer has no usable
    child line. Fetch and upstream failures propagate.
    """
    images = await image_services.fetch_images_as_base64([parent1.image_url, parent2.image_url])
    analysis = await gemini_service.analyze_images(images, build_analysis_prompt(parent1, parent2))
    logger.info(f"Gemini analysis: {analysis}")
    return parser.parse(analysis)


async def build_child_prompt(
    parent1: Pet,
    parent2: Pet,
    parser: ChildDescriptionParser = default_parser
) -> str:
    """
    Build the image-synthesis prompt for two parents.

    A vision-informed prompt is used when both parents have photos and the
    analysis yields a child description; every other path, including any
    failure of the analysis, falls back to the breed-name prompt.
    """
    description = None
    if parent1.image_url and parent2.image_url:
        try:
            description = await describe_child(parent1, parent2, parser)
        except Exception as e:
            logger.error(f"Gemini analysis error, using breed prompt: {e}")

    if description:
        return build_described_prompt(parent1, parent2, description)
    return build_breed_prompt(parent1, parent2)


async def generate_child_image(
    req: ChildGenerationRequest,
    parser: ChildDescriptionParser = default_parser
) -> str:
    """
    Produce a data URI of the imagined child of two pets.

    Raises:
        ConfigurationError: an API key is unset
        UpstreamError: the synthesis API answered non-2xx (status in the message)
        ImageGenerationError: any other synthesis failure
    """
    prompt = await build_child_prompt(req.parent1, req.parent2, parser)
    logger.info(f"Final prompt: {prompt}")

    try:
        image_bytes = await image_services.synthesize_image(prompt)
    except UpstreamError as e:
        if e.upstream_status is not None:
            raise
        raise ImageGenerationError(str(e))

    return image_services.to_data_uri(image_bytes)
