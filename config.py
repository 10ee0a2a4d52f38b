"""
Configuration module - loads all settings from environment variables.
"""
import os
from dotenv import load_dotenv

from common.exceptions import ConfigurationError

# Load environment variables from .env file
try:
    load_dotenv()
except Exception as e:
    print(f"Warning: Failed to load .env file: {e}")
    print("Continuing with environment variables or defaults...")


class Config:
    """Application configuration loaded from environment variables."""

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Safely parse integer environment variable."""
        try:
            return int(os.getenv(key, str(default)))
        except (ValueError, TypeError) as e:
            print(f"Warning: Invalid integer for {key}, using default {default}: {e}")
            return default

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Safely parse float environment variable."""
        try:
            return float(os.getenv(key, str(default)))
        except (ValueError, TypeError) as e:
            print(f"Warning: Invalid float for {key}, using default {default}: {e}")
            return default

    # Session tokens (issued by the external login service)
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-prod")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_DAYS: int = _get_int.__func__("ACCESS_TOKEN_EXPIRE_DAYS", 30)

    # Gemini (vision-language)
    GEMINI_TEXT_MODEL: str = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash")

    # Hugging Face (image synthesis)
    HUGGINGFACE_MODEL_URL: str = os.getenv(
        "HUGGINGFACE_MODEL_URL",
        "https://router.huggingface.co/hf-inference/models/stabilityai/stable-diffusion-xl-base-1.0",
    )

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = _get_float.__func__("HTTP_TIMEOUT_SECONDS", 120.0)

    # Pet store seed data
    PETS_DB_DIR: str = os.getenv("PETS_DB_DIR", "data")

    # Client pages
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_int.__func__("PORT", 8000)

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        cls.get_gemini_api_key()
        cls.get_huggingface_api_key()

    @classmethod
    def get_gemini_api_key(cls) -> str:
        """Get GEMINI_API_KEY, raise error if not set."""
        # Read on every call so key rotation does not need a restart
        api_key = os.getenv("GEMINI_API_KEY", "")
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY must be set in environment variables")
        return api_key

    @classmethod
    def get_huggingface_api_key(cls) -> str:
        """Get HUGGINGFACE_API_KEY, raise error if not set."""
        api_key = os.getenv("HUGGINGFACE_API_KEY", "")
        if not api_key:
            raise ConfigurationError("HUGGINGFACE_API_KEY must be set in environment variables")
        return api_key
