"""
Tests de integración para endpoints de la API.
"""

import pytest
from httpx import AsyncClient


class TestHealthEndpoints:
    """Tests para endpoints de salud."""
    
    @pytest.mark.asyncio
    async def test_root_endpoint(self, client: AsyncClient):
        """Test endpoint raíz."""
        response = await client.get("/")
        
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert "version" in data
    
    @pytest.mark.asyncio
    async def test_health_endpoint(self, client: AsyncClient):
        """Test endpoint de health check."""
        response = await client.get("/health")
        
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["payment_providers"] == ["PayPal", "Stripe"]
    
    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/", headers={"X-Request-ID": "req-123"})
        
        assert response.headers["X-Request-ID"] == "req-123"


class TestPaymentEndpoints:
    """Tests para endpoints de pagos."""
    
    @pytest.mark.asyncio
    async def test_list_providers(self, client: AsyncClient):
        response = await client.get("/api/providers")
        
        assert response.status_code == 200
        assert response.json()["data"]["providers"] == ["PayPal", "Stripe"]
    
    @pytest.mark.asyncio
    async def test_process_payment(self, client: AsyncClient):
        """Test procesar un pago."""
        response = await client.post("/api/providers/PayPal/payments", json={"item": "apple"})
        
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["data"] == {"provider": "PayPal", "operation": "payment", "item": "apple"}
    
    @pytest.mark.asyncio
    async def test_refund_payment(self, client: AsyncClient):
        """Test reembolsar un pago."""
        response = await client.post("/api/providers/Stripe/refunds", json={"item": "orange"})
        
        assert response.status_code == 200
        assert response.json()["data"]["operation"] == "refund"
    
    @pytest.mark.asyncio
    async def test_verify_payment(self, client: AsyncClient):
        """Test verificar una transacción."""
        response = await client.get("/api/providers/Stripe/payments/2/verify")
        
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["verified"] is True
        assert data["transaction_id"] == "2"
    
    @pytest.mark.asyncio
    async def test_unknown_provider_returns_404(self, client: AsyncClient):
        response = await client.post(
            "/api/providers/MercadoPago/payments",
            json={"item": "apple"},
            headers={"X-Request-ID": "req-404"},
        )
        
        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["code"] == "PROVIDER_NOT_FOUND"
        assert data["request_id"] == "req-404"
    
    @pytest.mark.asyncio
    async def test_not_found_body_carries_generated_request_id(self, client: AsyncClient):
        """Sin header X-Request-ID, el body del 404 lleva el ID generado."""
        response = await client.post("/api/providers/Nope/payments", json={"item": "apple"})
        
        assert response.status_code == 404
        generated = response.headers["X-Request-ID"]
        assert generated
        assert response.json()["request_id"] == generated
    
    @pytest.mark.asyncio
    async def test_verify_unknown_provider_returns_404(self, client: AsyncClient):
        response = await client.get("/api/providers/MercadoPago/payments/1/verify")
        
        assert response.status_code == 404
    
    @pytest.mark.asyncio
    async def test_empty_item_rejected(self, client: AsyncClient):
        response = await client.post("/api/providers/PayPal/payments", json={"item": "   "})
        
        assert response.status_code == 422
    
    @pytest.mark.asyncio
    async def test_dispatch_reaches_adapter(self, client: AsyncClient, gateway, paypal_spy):
        """El endpoint despacha al adapter registrado en el gateway."""
        from paygate.adapters import PaypalAdapter
        
        gateway.register("PayPal", PaypalAdapter(paypal_spy))
        
        response = await client.post("/api/providers/PayPal/payments", json={"item": "apple"})
        
        assert response.status_code == 201
        paypal_spy.make_payment.assert_called_once_with("apple")
