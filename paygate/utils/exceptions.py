"""
Excepciones personalizadas del gateway de pagos.
"""


class PaymentGatewayError(Exception):
    """Error base del gateway de pagos."""
    
    def __init__(self, message: str, code: str = "PAYMENT_GATEWAY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ProviderNotFoundError(PaymentGatewayError):
    """No hay ningún adapter registrado con ese nombre."""
    
    def __init__(self, name: str):
        super().__init__(
            message=f"Payment provider not registered: {name}",
            code="PROVIDER_NOT_FOUND",
        )
        self.name = name


class ProviderNotSupportedError(PaymentGatewayError):
    """El tipo de proveedor no tiene adapter disponible."""
    
    def __init__(self, kind: str, available: list[str]):
        super().__init__(
            message=f"Payment provider '{kind}' not supported. Available: {available}",
            code="PROVIDER_NOT_SUPPORTED",
        )
        self.kind = kind
        self.available = available
