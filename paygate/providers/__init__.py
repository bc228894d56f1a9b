"""
Proveedores de pago externos (mocks).
Cada uno expone su propia API, incompatible con las demás.
"""

from paygate.providers.paypal import PayPalProvider
from paygate.providers.stripe import StripeProvider

__all__ = [
    "PayPalProvider",
    "StripeProvider",
]
