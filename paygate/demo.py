"""
Demostración del gateway: registra PayPal y Stripe y ejecuta una
operación de cada tipo por proveedor.
"""

import structlog

from paygate.adapters import PaypalAdapter, StripeAdapter
from paygate.gateway import PaymentGateway
from paygate.providers import PayPalProvider, StripeProvider
from paygate.utils.logging import configure_logging


logger = structlog.get_logger(__name__)


def setup_gateway() -> PaymentGateway:
    """Construye los proveedores, los envuelve en adapters y los registra."""
    gateway = PaymentGateway()
    gateway.register("PayPal", PaypalAdapter(PayPalProvider()))
    gateway.register("Stripe", StripeAdapter(StripeProvider()))
    return gateway


def run_demo(gateway: PaymentGateway) -> dict[str, bool]:
    """
    Ejecuta la secuencia fija de seis llamadas.

    Returns:
        Resultado de la verificación por proveedor
    """
    gateway.process_payment("PayPal", "apple")
    gateway.process_payment("Stripe", "orange")

    gateway.refund_payment("PayPal", "apple")
    gateway.refund_payment("Stripe", "orange")

    return {
        "PayPal": gateway.verify_payment("PayPal", "1"),
        "Stripe": gateway.verify_payment("Stripe", "2"),
    }


def main() -> int:
    configure_logging()
    results = run_demo(setup_gateway())
    logger.info("Demo finished", verified=results)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
