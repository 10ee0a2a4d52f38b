"""Pet request/response Pydantic models."""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from common.exceptions import ValidationError


class Pet(BaseModel):
    """A pet record as owned by the pet store."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    category: str = Field(..., min_length=1)
    breed: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[Union[int, float, str]] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")

    @property
    def breed_or_category(self) -> str:
        return self.breed or self.category

    def to_wire(self) -> Dict[str, Any]:
        """Dump with wire field names, skipping unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PetInfo(BaseModel):
    """The subset of a pet profile the chat prompt uses."""
    name: Optional[str] = None
    category: Optional[str] = None
    breed: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[Union[int, float, str]] = None


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    pet_info: PetInfo = Field(default_factory=PetInfo, alias="petInfo")


class ChatResponse(BaseModel):
    response: str


class ChildGenerationRequest(BaseModel):
    parent1: Pet
    parent2: Pet


class GenerateChildResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(..., alias="imageUrl")


class PetListResponse(BaseModel):
    pets: List[Dict[str, Any]]


def _describe(e: PydanticValidationError) -> str:
    """Flatten the first pydantic error into one readable sentence."""
    first = e.errors()[0]
    where = ".".join(str(p) for p in first.get("loc", ()))
    return f"Invalid field '{where}': {first.get('msg', 'invalid value')}"


def parse_chat_request(payload: Any) -> ChatRequest:
    """Validate a raw chat body, raising ValidationError on bad input."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    if not payload.get("message"):
        raise ValidationError("Message is required")
    if payload.get("petInfo") is None:
        payload = {**payload, "petInfo": {}}
    try:
        return ChatRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_describe(e))


def parse_child_generation_request(payload: Any) -> ChildGenerationRequest:
    """Validate a raw generate-child body, raising ValidationError on bad input."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    if not payload.get("parent1") or not payload.get("parent2"):
        raise ValidationError("Two parents are required")
    try:
        return ChildGenerationRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_describe(e))
