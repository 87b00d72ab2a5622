from __future__ import annotations

from typing import Any, Dict, Optional


# ───────────────────────── Base & Registry Exceptions ─────────────────────────
class RegistryError(Exception):
    """Base class for registry errors. Never recovered inside the registry itself."""
    code: str = "registry_error"
    message: str
    details: Optional[Dict[str, Any]]

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or self.__class__.__name__)
        if code is not None:
            self.code = code
        self.message = message or self.__class__.__name__
        self.details = details


class MissingBindingError(RegistryError, LookupError):
    code = "missing_binding"

    def __init__(self, capability: type, key: Optional[str] = None) -> None:
        name = _qualname(capability)
        where = f" (key={key!r})" if key is not None else " (default binding)"
        super().__init__(
            f"No binding registered for {capability.__name__}{where}",
            details={"capability": name, "key": key},
        )
        self.capability = capability
        self.key = key


class DuplicateBindingError(RegistryError):
    code = "duplicate_binding"

    def __init__(self, capability: type, key: Optional[str] = None) -> None:
        where = f" (key={key!r})" if key is not None else " (default binding)"
        super().__init__(
            f"Binding already registered for {capability.__name__}{where}",
            details={"capability": _qualname(capability), "key": key},
        )
        self.capability = capability
        self.key = key


class InvalidBindingKeyError(RegistryError, ValueError):
    code = "invalid_binding_key"


class RegistrySealedError(RegistryError):
    code = "registry_sealed"


# ───────────────────────────── Helpers ──────────────────────────────────────

def _qualname(capability: type) -> str:
    return f"{capability.__module__}.{capability.__qualname__}"


__all__ = [
    "RegistryError",
    "MissingBindingError",
    "DuplicateBindingError",
    "InvalidBindingKeyError",
    "RegistrySealedError",
]
