"""API routes."""

from shift_pay.api.routes.health import router as health_router
from shift_pay.api.routes.pay import router as pay_router

__all__ = ["health_router", "pay_router"]
