"""
Holiday capability, its regional implementations, and the consumer service
"""
from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class HolidaysProvider(ABC):
    """
    Capability contract: describes a holiday.

    Implementations are stateless; one instance is shared for the whole
    process lifetime.
    """

    @abstractmethod
    def describe(self) -> str:
        """Return the holiday name."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class JapanHolidaysProvider(HolidaysProvider):
    def describe(self) -> str:
        return "天皇誕生日"


class USHolidaysProvider(HolidaysProvider):
    def describe(self) -> str:
        return "Independence Day"


class HolidayService:
    """Announces the holiday of the provider it was built with."""

    def __init__(self, provider: HolidaysProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> HolidaysProvider:
        return self._provider

    def announce(self, stream: Optional[TextIO] = None) -> str:
        """
        Write `Holiday: <name>` to `stream` (stdout by default).

        Returns:
            The line written, without the trailing newline
        """
        line = f"Holiday: {self._provider.describe()}"
        print(line, file=stream or sys.stdout)
        return line
