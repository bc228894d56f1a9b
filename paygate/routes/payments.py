"""
Endpoints para despachar pagos al proveedor registrado.
"""

import structlog
from fastapi import APIRouter, Depends, status

from paygate.gateway import PaymentGateway, get_gateway
from paygate.schemas import (
    APIResponse,
    ItemRequest,
    OperationResponse,
    ProviderListResponse,
    VerificationResponse,
)
from paygate.schemas.payment import OperationType


logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=APIResponse[ProviderListResponse],
    summary="Listar proveedores registrados",
)
async def list_providers(gateway: PaymentGateway = Depends(get_gateway)):
    """Lista los nombres registrados en el gateway."""
    return APIResponse(data=ProviderListResponse(providers=gateway.providers))


@router.post(
    "/{name}/payments",
    response_model=APIResponse[OperationResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Procesar un pago",
    description="""
    Cobra un item con el proveedor registrado bajo `name`.
    
    - Retorna 404 si el proveedor no está registrado
    """,
)
async def process_payment(
    name: str,
    request: ItemRequest,
    gateway: PaymentGateway = Depends(get_gateway),
):
    """Procesa un pago."""
    gateway.process_payment(name, request.item)
    logger.info("Payment processed", provider=name, item=request.item)
    
    return APIResponse(
        message="Payment processed",
        data=OperationResponse(
            provider=name,
            operation=OperationType.PAYMENT,
            item=request.item,
        ),
    )


@router.post(
    "/{name}/refunds",
    response_model=APIResponse[OperationResponse],
    summary="Reembolsar un pago",
)
async def refund_payment(
    name: str,
    request: ItemRequest,
    gateway: PaymentGateway = Depends(get_gateway),
):
    """Reembolsa un pago."""
    gateway.refund_payment(name, request.item)
    logger.info("Payment refunded", provider=name, item=request.item)
    
    return APIResponse(
        message="Payment refunded",
        data=OperationResponse(
            provider=name,
            operation=OperationType.REFUND,
            item=request.item,
        ),
    )


@router.get(
    "/{name}/payments/{transaction_id}/verify",
    response_model=APIResponse[VerificationResponse],
    summary="Verificar una transacción",
)
async def verify_payment(
    name: str,
    transaction_id: str,
    gateway: PaymentGateway = Depends(get_gateway),
):
    """Verifica una transacción en el proveedor."""
    verified = gateway.verify_payment(name, transaction_id)
    
    return APIResponse(
        data=VerificationResponse(
            provider=name,
            transaction_id=transaction_id,
            verified=verified,
        ),
    )
