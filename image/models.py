"""Image synthesis Pydantic models."""
from pydantic import BaseModel, Field

NEGATIVE_PROMPT = "ugly, deformed, low quality, blurry, distorted"


class SynthesisParameters(BaseModel):
    negative_prompt: str = NEGATIVE_PROMPT
    num_inference_steps: int = Field(30, ge=1)
    width: int = Field(1024, ge=64)
    height: int = Field(1024, ge=64)


class SynthesisRequest(BaseModel):
    """Body of a Hugging Face text-to-image inference call."""
    inputs: str = Field(..., min_length=1)
    parameters: SynthesisParameters = Field(default_factory=SynthesisParameters)
