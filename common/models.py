"""Models shared between the upstream AI service clients."""
from pydantic import BaseModel, Field


class ImageInput(BaseModel):
    """Image input data matching Gemini inline-data format."""
    mime_type: str = Field("image/jpeg", description="Image MIME type (e.g., image/png, image/jpeg)")
    data: str = Field(..., description="Base64-encoded image data")
