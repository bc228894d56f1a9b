"""
Configuración de tests y fixtures compartidos.
"""

from typing import AsyncGenerator
from unittest.mock import create_autospec

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from paygate.demo import setup_gateway
from paygate.gateway import PaymentGateway, get_gateway
from paygate.main import app
from paygate.providers import PayPalProvider, StripeProvider


@pytest.fixture
def gateway() -> PaymentGateway:
    """Gateway con PayPal y Stripe registrados."""
    return setup_gateway()


@pytest.fixture
def paypal_spy():
    """Cliente PayPal espía (verify retorna True como el real)."""
    spy = create_autospec(PayPalProvider, instance=True)
    spy.verify_payment.return_value = True
    return spy


@pytest.fixture
def stripe_spy():
    """Cliente Stripe espía (verify_charge retorna True como el real)."""
    spy = create_autospec(StripeProvider, instance=True)
    spy.verify_charge.return_value = True
    return spy


@pytest_asyncio.fixture(scope="function")
async def client(gateway: PaymentGateway) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP para tests de API, con un gateway nuevo por test."""
    app.dependency_overrides[get_gateway] = lambda: gateway
    
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    
    app.dependency_overrides.clear()
