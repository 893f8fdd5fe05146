"""
Base Pydantic model configuration for API schemas.
"""

from pydantic import BaseModel, ConfigDict


class BaseModelConfig(BaseModel):
    """Base Pydantic model configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        protected_namespaces=(),
    )


class ErrorResponse(BaseModelConfig):
    """Body of every error response produced by the exception handlers."""

    detail: str
    error_code: str
    error_id: str | None = None
