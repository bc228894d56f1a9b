"""
Adapter para PayPal.
Traduce la interfaz PaymentProvider a la API de PayPalProvider.
"""

import structlog

from paygate.adapters.base import PaymentProvider
from paygate.providers import PayPalProvider


logger = structlog.get_logger(__name__)


class PaypalAdapter(PaymentProvider):
    """Adapter para PayPal. Es dueño exclusivo de su PayPalProvider."""
    
    def __init__(self, provider: PayPalProvider | None = None):
        """
        Inicializa el adapter de PayPal.
        
        Args:
            provider: Cliente de PayPal (se crea uno si no se proporciona)
        """
        self._provider = provider or PayPalProvider()
        logger.debug("PaypalAdapter initialized")
    
    @property
    def provider_name(self) -> str:
        return "paypal"
    
    def process_payment(self, item: str) -> None:
        """Cobra el item con PayPalProvider.make_payment."""
        self._provider.make_payment(item)
    
    def handle_refund(self, item: str) -> None:
        """Reembolsa el item con PayPalProvider.refund_payment."""
        self._provider.refund_payment(item)
    
    def verify_payment(self, transaction_id: str) -> bool:
        """Verifica la transacción con PayPalProvider.verify_payment."""
        return self._provider.verify_payment(transaction_id)
