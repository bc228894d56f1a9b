"""
Utilidades del gateway de pagos.
"""

from paygate.utils.exceptions import (
    PaymentGatewayError,
    ProviderNotFoundError,
    ProviderNotSupportedError,
)
from paygate.utils.logging import configure_logging

__all__ = [
    # Errores
    "PaymentGatewayError",
    "ProviderNotFoundError",
    "ProviderNotSupportedError",
    # Logging
    "configure_logging",
]
