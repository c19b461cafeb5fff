"""Client configuration with environment variable loading.

Pydantic-based configuration for talking to the chat backend.
The only required setting is the backend base URL, which defaults to a
local development server.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:8000"


class ClientConfig(BaseModel):
    """Configuration for the backend HTTP client.

    Attributes:
        api_base_url: Backend root URL, without trailing slash.
        chat_timeout: Seconds allowed per read on chat and registry requests.
        upload_timeout: Seconds allowed for a single file upload.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
        description="Base URL of the chat backend",
    )
    chat_timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAT_TIMEOUT", "120")),
        gt=0,
        description="Timeout in seconds for chat requests",
    )
    upload_timeout: float = Field(
        default_factory=lambda: float(os.getenv("UPLOAD_TIMEOUT", "300")),
        gt=0,
        description="Timeout in seconds for each file upload",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "API_BASE_URL must start with http:// or https://"
            )
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If API_BASE_URL is not an http(s) URL.
    """
    return ClientConfig()
