"""
Keyed dependency registration demo
Registry, holiday capability and its consumer
"""

from keyed_di.di import Binding, ServiceRegistry
from keyed_di.exceptions import (
    DuplicateBindingError,
    InvalidBindingKeyError,
    MissingBindingError,
    RegistryError,
    RegistrySealedError,
)
from keyed_di.holidays import (
    HolidayService,
    HolidaysProvider,
    JapanHolidaysProvider,
    USHolidaysProvider,
)

__version__ = "0.1.0"

__all__ = [
    # Registry
    "Binding",
    "ServiceRegistry",
    # Errors
    "RegistryError",
    "MissingBindingError",
    "DuplicateBindingError",
    "InvalidBindingKeyError",
    "RegistrySealedError",
    # Holidays
    "HolidaysProvider",
    "JapanHolidaysProvider",
    "USHolidaysProvider",
    "HolidayService",
]
