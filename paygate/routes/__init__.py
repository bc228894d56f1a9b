"""
Rutas/Endpoints del gateway de pagos.
"""

from paygate.routes.payments import router as payments_router

__all__ = [
    "payments_router",
]
