"""
Keyed Service Registry
Maps (capability, optional key) to a singleton instance or a lazy factory
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar, Union

from keyed_di.config import DUPLICATE_POLICIES
from keyed_di.exceptions import (
    DuplicateBindingError,
    InvalidBindingKeyError,
    MissingBindingError,
    RegistrySealedError,
)
from keyed_di.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_BindingKey = Tuple[type, Optional[str]]
_ServiceFactory = Callable[["ServiceRegistry"], Any]

SINGLETON = "singleton"


@dataclass(frozen=True)
class Binding:
    """
    One registry entry.

    Attributes:
        capability: Capability class the binding satisfies
        key: Binding key, or None for the default binding
        instance: Pre-built instance (mutually exclusive with factory)
        factory: Callable receiving the registry, run once on first resolution
        lifetime: Always "singleton"
    """

    capability: type
    key: Optional[str] = None
    instance: Any = None
    factory: Optional[_ServiceFactory] = None
    lifetime: str = SINGLETON

    @property
    def is_factory(self) -> bool:
        return self.factory is not None


class ServiceRegistry:
    """
    Registry of capability implementations, optionally distinguished by key.

    The default (unkeyed) binding and the keyed bindings of a capability are
    independent: neither is ever used as a fallback for the other. Every
    binding is a singleton; factories run at most once.
    """

    def __init__(self, on_duplicate: str = "overwrite") -> None:
        if on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(f"on_duplicate must be one of {DUPLICATE_POLICIES}, got {on_duplicate!r}")
        self._on_duplicate = on_duplicate
        self._bindings: Dict[_BindingKey, Binding] = {}
        self._instances: Dict[_BindingKey, Any] = {}
        self._sealed = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register_default(self, capability: Type[T], instance: T) -> None:
        """Bind `instance` as the unkeyed resolution for `capability`."""
        self._add(Binding(capability=capability, instance=instance))

    def register_keyed(self, capability: Type[T], key: str, instance: T) -> None:
        """Bind `instance` for (`capability`, `key`); `key` must be non-empty."""
        self._add(Binding(capability=capability, key=_check_key(key), instance=instance))

    def register_default_factory(
        self, capability: Type[T], factory: Callable[[ServiceRegistry], T]
    ) -> None:
        """Bind a lazily built singleton as the unkeyed resolution for `capability`."""
        self._add(Binding(capability=capability, factory=factory))

    def register_keyed_factory(
        self, capability: Type[T], key: str, factory: Callable[[ServiceRegistry], T]
    ) -> None:
        """Bind a lazily built singleton for (`capability`, `key`)."""
        self._add(Binding(capability=capability, key=_check_key(key), factory=factory))

    def seal(self) -> None:
        """End the setup phase; later registrations raise RegistrySealedError."""
        self._sealed = True
        logger.debug("registry sealed", bindings=len(self._bindings))

    @property
    def sealed(self) -> bool:
        return self._sealed

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve(self, capability: Type[T]) -> T:
        """
        Return the default binding for `capability`.

        Raises:
            MissingBindingError: No unkeyed binding was registered
        """
        return self._get((capability, None))

    def resolve_keyed(self, capability: Type[T], key: str) -> T:
        """
        Return the binding for exactly (`capability`, `key`).

        Raises:
            InvalidBindingKeyError: `key` is None, empty or not a string
            MissingBindingError: No binding was registered for that pair
        """
        return self._get((capability, _check_key(key)))

    def is_registered(self, capability: type, key: Optional[str] = None) -> bool:
        return (capability, key) in self._bindings

    def keys(self, capability: type) -> List[str]:
        """Registered keys for `capability` in registration order, default excluded."""
        return [k for (cap, k) in self._bindings if cap is capability and k is not None]

    def __contains__(self, item: Union[type, _BindingKey]) -> bool:
        if isinstance(item, tuple):
            return self.is_registered(*item)
        return self.is_registered(item)

    def __len__(self) -> int:
        return len(self._bindings)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _add(self, binding: Binding) -> None:
        slot = (binding.capability, binding.key)
        name = binding.capability.__name__
        if self._sealed:
            raise RegistrySealedError(
                f"Registry is sealed; cannot register {name} (key={binding.key!r})",
                details={"capability": name, "key": binding.key},
            )
        if slot in self._bindings:
            if self._on_duplicate == "error":
                raise DuplicateBindingError(binding.capability, binding.key)
            # last write wins; drop any singleton built from the old binding
            self._instances.pop(slot, None)
            logger.debug("binding overwritten", capability=binding.capability, key=binding.key)
        self._bindings[slot] = binding
        logger.debug(
            "binding registered",
            capability=binding.capability,
            key=binding.key,
            factory=binding.is_factory,
        )

    def _get(self, slot: _BindingKey) -> Any:
        binding = self._bindings.get(slot)
        if binding is None:
            capability, key = slot
            logger.warning("binding missing", capability=capability, key=key)
            raise MissingBindingError(capability, key)
        if not binding.is_factory:
            return binding.instance
        if slot not in self._instances:
            self._instances[slot] = binding.factory(self)
            logger.debug("singleton created", capability=binding.capability, key=binding.key)
        return self._instances[slot]


def _check_key(key: Any) -> str:
    if not isinstance(key, str) or not key:
        raise InvalidBindingKeyError(
            f"Binding key must be a non-empty string, got {key!r}",
            details={"key": repr(key)},
        )
    return key


__all__ = ["Binding", "ServiceRegistry", "SINGLETON"]
