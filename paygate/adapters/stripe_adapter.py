"""
Adapter para Stripe.
Implementa PaymentProvider sobre los métodos de StripeProvider.
"""

import structlog

from paygate.adapters.base import PaymentProvider
from paygate.providers import StripeProvider


logger = structlog.get_logger(__name__)


class StripeAdapter(PaymentProvider):
    """
    Adapter para Stripe.
    
    Stripe habla de "cargos" en lugar de pagos: process_payment se
    traduce a charge_payment, verify_payment a verify_charge y
    handle_refund a issue_refund.
    """
    
    def __init__(self, provider: StripeProvider | None = None):
        """
        Inicializa el adapter de Stripe.
        
        Args:
            provider: Cliente de Stripe (se crea uno si no se proporciona)
        """
        self._provider = provider or StripeProvider()
        logger.debug("StripeAdapter initialized")
    
    @property
    def provider_name(self) -> str:
        return "stripe"
    
    def process_payment(self, item: str) -> None:
        """Cobra el item como un cargo de Stripe."""
        self._provider.charge_payment(item)
    
    def handle_refund(self, item: str) -> None:
        """Emite un reembolso en Stripe."""
        self._provider.issue_refund(item)
    
    def verify_payment(self, transaction_id: str) -> bool:
        """Verifica el cargo asociado a la transacción."""
        return self._provider.verify_charge(transaction_id)
