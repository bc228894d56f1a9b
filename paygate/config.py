"""
Configuración del gateway de pagos.
Carga variables de entorno y define settings globales.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal


class Settings(BaseSettings):
    """Configuración principal del servicio."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )
    
    # Aplicación
    APP_NAME: str = "Paygate Payment Gateway"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    # Proveedores registrados al arrancar (nombre de registro = tipo de adapter)
    PAYMENT_PROVIDERS: list[str] = ["PayPal", "Stripe"]


@lru_cache()
def get_settings() -> Settings:
    """Retorna instancia cacheada de settings."""
    return Settings()


settings = get_settings()
