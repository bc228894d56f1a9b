"""
Mock de la API de PayPal.
"""

import structlog


logger = structlog.get_logger(__name__)


class PayPalProvider:
    """
    Simula el cliente de PayPal.
    
    No realiza llamadas de red: cada operación solo deja constancia en el log
    y siempre tiene éxito.
    """
    
    def make_payment(self, item: str) -> None:
        logger.info("Making PayPal payment", item=item)
    
    def verify_payment(self, transaction_id: str) -> bool:
        logger.info("Verifying PayPal payment", transaction_id=transaction_id)
        return True
    
    def refund_payment(self, item: str) -> None:
        logger.info("Refunding PayPal payment", item=item)
