"""
Composition root: wires the registry, then resolves and prints each binding
"""
from __future__ import annotations

import sys
from typing import Optional, TextIO

import structlog

from keyed_di.config import Settings, get_settings
from keyed_di.di import ServiceRegistry
from keyed_di.holidays import (
    HolidayService,
    HolidaysProvider,
    JapanHolidaysProvider,
    USHolidaysProvider,
)
from keyed_di.logging import configure_logging, get_logger

logger = get_logger(__name__)

HOLIDAY_SERVICE_KEY = "US"


def build_registry(settings: Optional[Settings] = None) -> ServiceRegistry:
    """Register every binding of the demo and return the sealed registry."""
    settings = settings or get_settings()
    registry = ServiceRegistry(on_duplicate=settings.on_duplicate)

    registry.register_default(HolidaysProvider, JapanHolidaysProvider())
    registry.register_keyed(HolidaysProvider, "JP", JapanHolidaysProvider())
    registry.register_keyed(HolidaysProvider, "US", USHolidaysProvider())

    registry.register_default_factory(
        HolidayService,
        lambda r: HolidayService(r.resolve_keyed(HolidaysProvider, HOLIDAY_SERVICE_KEY)),
    )

    registry.seal()
    return registry


def run(registry: ServiceRegistry, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout

    default_provider = registry.resolve(HolidaysProvider)
    print(f"Default Provider: {default_provider.describe()}", file=out)

    japan_provider = registry.resolve_keyed(HolidaysProvider, "JP")
    us_provider = registry.resolve_keyed(HolidaysProvider, "US")
    print(f"Japan Provider: {japan_provider.describe()}", file=out)
    print(f"US Provider: {us_provider.describe()}", file=out)

    registry.resolve(HolidayService).announce(out)


def main() -> int:
    settings = get_settings()
    configure_logging(settings)

    with structlog.contextvars.bound_contextvars(app="keyed-di-demo"):
        logger.info("demo started", settings=settings.safe_dict())
        run(build_registry(settings))
        logger.info("demo finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
