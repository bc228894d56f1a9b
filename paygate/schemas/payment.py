"""
Schemas para operaciones de pago.
"""

from enum import Enum

from pydantic import Field

from paygate.schemas.common import BaseSchema


class OperationType(str, Enum):
    """Operaciones que el gateway despacha."""
    
    PAYMENT = "payment"
    REFUND = "refund"


# ============================================
# Request Schemas (entrada)
# ============================================

class ItemRequest(BaseSchema):
    """Request para cobrar o reembolsar un item."""
    
    item: str = Field(..., min_length=1, max_length=255, description="Item a cobrar o reembolsar")


# ============================================
# Response Schemas (salida)
# ============================================

class OperationResponse(BaseSchema):
    """Resultado de un pago o reembolso despachado."""
    
    provider: str
    operation: OperationType
    item: str


class VerificationResponse(BaseSchema):
    """Resultado de la verificación de una transacción."""
    
    provider: str
    transaction_id: str
    verified: bool


class ProviderListResponse(BaseSchema):
    """Proveedores registrados en el gateway."""
    
    providers: list[str]
