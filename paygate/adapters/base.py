"""
Interfaz base abstracta para proveedores de pago.
Define el contrato que todos los adapters deben implementar.
"""

from abc import ABC, abstractmethod


class PaymentProvider(ABC):
    """
    Interfaz abstracta para proveedores de pago.
    
    Todos los adapters de pasarelas de pago (PayPal, Stripe, etc.)
    deben implementar esta interfaz para que el gateway pueda
    despacharles operaciones sin conocer el proveedor concreto.
    """
    
    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nombre del proveedor (ej: 'paypal', 'stripe')."""
        pass
    
    @abstractmethod
    def process_payment(self, item: str) -> None:
        """
        Procesa el pago de un item.
        
        Args:
            item: Item a cobrar
        """
        pass
    
    @abstractmethod
    def handle_refund(self, item: str) -> None:
        """
        Reembolsa el pago de un item.
        
        Args:
            item: Item a reembolsar
        """
        pass
    
    @abstractmethod
    def verify_payment(self, transaction_id: str) -> bool:
        """
        Verifica una transacción en el proveedor.
        
        Args:
            transaction_id: ID de la transacción en el proveedor
            
        Returns:
            True si el proveedor confirma el pago
        """
        pass
