"""
Gateway to the grounded generative backend.
"""

from .client import GatewayError, GeminiClient, GeminiConfig, GroundedResponse
from .service import CourtGateway, extract_sources

__all__ = [
    "CourtGateway",
    "GatewayError",
    "GeminiClient",
    "GeminiConfig",
    "GroundedResponse",
    "extract_sources",
]
