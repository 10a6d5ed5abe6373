"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from shift_pay.calculators.engine import PayEngine
from shift_pay.config import Settings, get_settings


def get_app_settings() -> Settings:
    """Get settings dependency."""
    return get_settings()


def get_pay_engine(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> PayEngine:
    """Build a pay engine per request."""
    return PayEngine(
        strict=settings.strict_validation,
        engine_version=settings.engine_version,
    )


# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_app_settings)]
Engine = Annotated[PayEngine, Depends(get_pay_engine)]
