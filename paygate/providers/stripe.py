"""
Mock de la API de Stripe.
"""

import structlog


logger = structlog.get_logger(__name__)


class StripeProvider:
    """Simula el cliente de Stripe (cargos, verificación y reembolsos)."""
    
    def charge_payment(self, item: str) -> None:
        logger.info("Charging Stripe payment", item=item)
    
    def verify_charge(self, transaction_id: str) -> bool:
        logger.info("Verifying Stripe charge", transaction_id=transaction_id)
        return True
    
    def issue_refund(self, item: str) -> None:
        logger.info("Issuing Stripe refund", item=item)
