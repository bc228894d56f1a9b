"""
Gateway de pagos.
Registro de adapters por nombre y despacho de operaciones al adapter correcto.
"""

import threading
from functools import lru_cache
from typing import Iterable

import structlog

from paygate.adapters import PaymentProvider, build_adapter
from paygate.config import settings
from paygate.utils.exceptions import ProviderNotFoundError


logger = structlog.get_logger(__name__)


class PaymentGateway:
    """
    Tabla de despacho nombre -> PaymentProvider.

    El gateway solo depende de la interfaz PaymentProvider, nunca de los
    proveedores concretos. Registrar un nombre ya existente reemplaza el
    adapter anterior. El mapa está protegido por un lock para poder
    compartir la instancia entre requests concurrentes; las llamadas a los
    adapters se hacen fuera del lock.
    """

    def __init__(self):
        self._providers: dict[str, PaymentProvider] = {}
        self._lock = threading.RLock()

    def register(self, name: str, adapter: PaymentProvider) -> None:
        """
        Registra (o reemplaza) el adapter para un nombre.

        Raises:
            TypeError: Si el adapter no implementa PaymentProvider
        """
        if not isinstance(adapter, PaymentProvider):
            raise TypeError(
                f"Adapter for '{name}' must implement PaymentProvider, "
                f"got {type(adapter).__name__}"
            )

        with self._lock:
            replaced = name in self._providers
            self._providers[name] = adapter

        logger.info(
            "Payment provider registered",
            name=name,
            provider=adapter.provider_name,
            replaced=replaced,
        )

    def unregister(self, name: str) -> PaymentProvider:
        """Elimina el adapter registrado y lo retorna."""
        with self._lock:
            adapter = self._providers.pop(name, None)

        if adapter is None:
            raise ProviderNotFoundError(name)

        logger.info("Payment provider unregistered", name=name)
        return adapter

    def get(self, name: str) -> PaymentProvider:
        """
        Obtiene el adapter registrado para un nombre.

        Raises:
            ProviderNotFoundError: Si no hay adapter con ese nombre
        """
        with self._lock:
            adapter = self._providers.get(name)

        if adapter is None:
            logger.warning("Payment provider not registered", name=name)
            raise ProviderNotFoundError(name)

        return adapter

    @property
    def providers(self) -> list[str]:
        """Nombres registrados, ordenados."""
        with self._lock:
            return sorted(self._providers)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._providers

    def __len__(self) -> int:
        with self._lock:
            return len(self._providers)

    # ============================================
    # Operaciones despachadas
    # ============================================

    def process_payment(self, name: str, item: str) -> None:
        """Cobra un item con el proveedor registrado bajo `name`."""
        adapter = self.get(name)
        logger.debug("Dispatching payment", name=name, item=item)
        adapter.process_payment(item)

    def refund_payment(self, name: str, item: str) -> None:
        """Reembolsa un item con el proveedor registrado bajo `name`."""
        adapter = self.get(name)
        logger.debug("Dispatching refund", name=name, item=item)
        adapter.handle_refund(item)

    def verify_payment(self, name: str, transaction_id: str) -> bool:
        """Verifica una transacción y retorna el resultado del proveedor."""
        adapter = self.get(name)
        verified = adapter.verify_payment(transaction_id)
        logger.debug(
            "Payment verified",
            name=name,
            transaction_id=transaction_id,
            verified=verified,
        )
        return verified


def build_gateway(names: Iterable[str] | None = None) -> PaymentGateway:
    """
    Construye un gateway con un adapter por nombre.

    Cada nombre se registra tal cual y se usa (sin distinguir mayúsculas)
    como tipo de adapter en la factory.

    Args:
        names: Nombres a registrar (por defecto PAYMENT_PROVIDERS)

    Raises:
        ProviderNotSupportedError: Si algún nombre no tiene adapter
    """
    gateway = PaymentGateway()

    for name in names if names is not None else settings.PAYMENT_PROVIDERS:
        gateway.register(name, build_adapter(name))

    return gateway


@lru_cache()
def get_gateway() -> PaymentGateway:
    """Gateway compartido por la API, construido desde la configuración."""
    gateway = build_gateway()
    logger.info("Payment gateway initialized", providers=gateway.providers)
    return gateway
