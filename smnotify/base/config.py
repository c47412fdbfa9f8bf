"""
Pydantic configuration model for the Secrets Manager client session.

Validates session settings at initialization time instead of
silently passing bad values to the SDK authenticator.
"""

from __future__ import annotations

import os
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field, model_validator


EndpointType = Literal["public", "private"]

DEFAULT_REGION = "us-south"
DEFAULT_TIMEOUT = 60.0


class SessionConfig(BaseModel):
    """Configuration for the Secrets Manager client session.

    Settings are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (IBMCLOUD_API_KEY / IC_API_KEY, IBMCLOUD_REGION /
       IC_REGION, IBMCLOUD_VISIBILITY, IBMCLOUD_IAM_API_ENDPOINT,
       IBMCLOUD_SECRETS_MANAGER_API_ENDPOINT).
    3. Defaults: region ``us-south``, ``public`` endpoints, the SDK's IAM URL.
    """

    model_config = ConfigDict(extra="forbid")

    api_key: str | None = Field(default=None, description="IBM Cloud API key")
    region: str = Field(default=DEFAULT_REGION, description="Default instance region")
    endpoint_type: EndpointType = Field(
        default="public", description="Default endpoint visibility"
    )
    iam_url: str | None = Field(default=None, description="IAM token endpoint override")
    service_url: str | None = Field(
        default=None, description="Secrets Manager endpoint override"
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds")

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing settings."""
        values = dict(values)
        env_map = {
            "api_key": ("IBMCLOUD_API_KEY", "IC_API_KEY"),
            "region": ("IBMCLOUD_REGION", "IC_REGION"),
            "iam_url": ("IBMCLOUD_IAM_API_ENDPOINT",),
            "service_url": ("IBMCLOUD_SECRETS_MANAGER_API_ENDPOINT",),
        }
        for field, env_vars in env_map.items():
            if values.get(field):
                continue
            for env_var in env_vars:
                if os.environ.get(env_var):
                    values[field] = os.environ[env_var]
                    break
        if not values.get("endpoint_type"):
            visibility = os.environ.get("IBMCLOUD_VISIBILITY")
            if visibility:
                # "public-and-private" resolves to the public endpoint
                values["endpoint_type"] = "private" if visibility == "private" else "public"
        return values

    @model_validator(mode="after")
    def require_api_key(self) -> SessionConfig:
        """Ensure an API key was supplied one way or another."""
        if not self.api_key:
            raise ValueError(
                "IBM Cloud api_key is required. Set it explicitly or via "
                "IBMCLOUD_API_KEY / IC_API_KEY environment variable."
            )
        return self


def validate_config(config: dict) -> SessionConfig:
    """Validate and return a typed session config.

    Args:
        config: Raw configuration dictionary.

    Returns:
        A validated :class:`SessionConfig`.

    Raises:
        pydantic.ValidationError: If the config is invalid.
    """
    return SessionConfig(**config)


__all__ = [
    "EndpointType",
    "SessionConfig",
    "validate_config",
]
