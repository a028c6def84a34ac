"""Dependency injection for FastAPI endpoints"""

from decimal import Decimal
from fastapi import Request
from fincalc_gateway.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_capitalization_bonus() -> Decimal:
    """Provide the configured capitalization rate bonus"""
    return settings.capitalization_bonus_percent
