"""
Adapters para proveedores de pago.
Implementación del patrón Adapter para abstraer diferentes pasarelas.
"""

from paygate.adapters.base import PaymentProvider
from paygate.adapters.paypal_adapter import PaypalAdapter
from paygate.adapters.stripe_adapter import StripeAdapter
from paygate.adapters.factory import ADAPTERS, build_adapter

__all__ = [
    "PaymentProvider",
    "PaypalAdapter",
    "StripeAdapter",
    "ADAPTERS",
    "build_adapter",
]
