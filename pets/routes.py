"""Pet routes - advisor chat, child-image generation and pet listing."""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from auth.models import Session
from auth.services import get_current_session
from config import Config
from pets.models import (
    ChatResponse,
    GenerateChildResponse,
    PetListResponse,
    parse_chat_request,
    parse_child_generation_request
)
from pets.services import answer_pet_question, generate_child_image
from pets.store import pet_store
from utils.logger import get_logger

logger = get_logger("pets")
router = APIRouter(prefix="/api/pets", tags=["pets"])


# ---------- Configuration guards ----------
# Dependencies run before body validation, so a missing key wins over a bad body.
def require_chat_config() -> None:
    Config.get_gemini_api_key()


def require_generation_config() -> None:
    Config.get_huggingface_api_key()
    Config.get_gemini_api_key()


@router.get("", response_model=PetListResponse)
def list_pets(session: Session = Depends(get_current_session)):
    """List the caller's pets."""
    pets = pet_store.list_pets(session)
    return {"pets": [p.to_wire() for p in pets]}


@router.post("/chat", response_model=ChatResponse)
def chat(
    payload: Dict[str, Any] = Body(...),
    _: None = Depends(require_chat_config)
):
    """
    Answer an owner's question about a pet.

    Accepts:
      { message: "...", petInfo: { name?, category?, breed?, gender?, age? } }
    """
    req = parse_chat_request(payload)
    logger.info(f"Chat question about pet '{req.pet_info.name}': {req.message[:50]}...")
    response = answer_pet_question(req)
    return {"response": response}


@router.post("/generate-child", response_model=GenerateChildResponse, response_model_by_alias=True)
async def generate_child(
    payload: Dict[str, Any] = Body(...),
    _: None = Depends(require_generation_config)
):
    """
    Generate an image of the imagined child of two pets.

    Accepts:
      { parent1: Pet, parent2: Pet }

    Returns:
      { imageUrl: "data:image/jpeg;base64,..." }
    """
    req = parse_child_generation_request(payload)
    logger.info(
        f"Generating child of '{req.parent1.name}' ({req.parent1.breed_or_category}) "
        f"and '{req.parent2.name}' ({req.parent2.breed_or_category})"
    )
    image_url = await generate_child_image(req)
    return GenerateChildResponse(image_url=image_url)
