"""
Pydantic schemas shared by every router.

The dashboard client speaks camelCase JSON; CamelModel maps it onto
snake_case attributes in both directions.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys.

    Requests accept either camelCase or snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    message: str


class WithdrawalErrorResponse(ErrorResponse):
    """Error response for rejected withdrawals, with per-field messages."""

    errors: dict[str, str]


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
