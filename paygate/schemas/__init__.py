"""
Schemas Pydantic de la API.
"""

from paygate.schemas.common import APIResponse, BaseSchema, ErrorResponse
from paygate.schemas.payment import (
    ItemRequest,
    OperationResponse,
    ProviderListResponse,
    VerificationResponse,
)

__all__ = [
    "APIResponse",
    "BaseSchema",
    "ErrorResponse",
    "ItemRequest",
    "OperationResponse",
    "ProviderListResponse",
    "VerificationResponse",
]
