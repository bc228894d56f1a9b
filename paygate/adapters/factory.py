"""
Factory para construir adapters por tipo de proveedor.
"""

from typing import Callable

import structlog

from paygate.adapters.base import PaymentProvider
from paygate.adapters.paypal_adapter import PaypalAdapter
from paygate.adapters.stripe_adapter import StripeAdapter
from paygate.utils.exceptions import ProviderNotSupportedError


logger = structlog.get_logger(__name__)


# Registro de adapters disponibles
ADAPTERS: dict[str, Callable[[], PaymentProvider]] = {
    "paypal": PaypalAdapter,
    "stripe": StripeAdapter,
}


def build_adapter(kind: str) -> PaymentProvider:
    """
    Construye un adapter nuevo para el tipo de proveedor indicado.
    
    Args:
        kind: Tipo de proveedor ("paypal", "stripe"); no distingue mayúsculas
        
    Returns:
        Instancia del PaymentProvider, con su propio cliente mock
        
    Raises:
        ProviderNotSupportedError: Si el tipo no está soportado
    """
    key = kind.lower()
    
    if key not in ADAPTERS:
        raise ProviderNotSupportedError(kind, list(ADAPTERS.keys()))
    
    adapter = ADAPTERS[key]()
    logger.info("Payment adapter built", provider=key)
    return adapter
