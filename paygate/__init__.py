"""
paygate - Gateway de pagos basado en el patrón Adapter.
"""

__version__ = "1.0.0"
