"""Registry of installed currency field adapters, keyed by field identity.

Platform bindings keep one adapter per native field. Installing on a field
that already has an adapter detaches the old one first, so a re-initialized
field never has two adapters reacting to the same keystroke.

Thread Safety:
    Registry operations are protected by RLock. Adapters themselves are
    single-threaded; only the mapping is shared.

Python 3.13+.
"""

import logging
from collections.abc import Hashable
from threading import RLock

from currencyfield.runtime import MaskEngine

from .adapter import CurrencyFieldAdapter, CurrencyFieldListener, FieldConfig

__all__ = ["FieldRegistry"]

logger = logging.getLogger(__name__)


class FieldRegistry:
    """Mapping of field identifier to its CurrencyFieldAdapter.

    Example:
        >>> registry = FieldRegistry()
        >>> adapter = registry.install(42, FieldConfig(FormatOptions("EUR", locale="de_DE")))
        >>> 42 in registry
        True
        >>> registry.remove(42) is adapter
        True
    """

    def __init__(self) -> None:
        self._adapters: dict[Hashable, CurrencyFieldAdapter] = {}
        self._lock = RLock()

    def __contains__(self, field_id: object) -> bool:
        with self._lock:
            return field_id in self._adapters

    def __len__(self) -> int:
        with self._lock:
            return len(self._adapters)

    def install(
        self,
        field_id: Hashable,
        config: FieldConfig,
        listener: CurrencyFieldListener | None = None,
    ) -> CurrencyFieldAdapter:
        """Create and register an adapter for field_id.

        The configuration is validated here, once, rather than per keystroke.

        Raises:
            ConfigurationError: If the currency, locale or maximum is unusable
        """
        engine = MaskEngine.create_or_raise(config.options, max_value=config.max_value)
        adapter = CurrencyFieldAdapter(config, listener, engine=engine)

        with self._lock:
            previous = self._adapters.get(field_id)
            self._adapters[field_id] = adapter

        if previous is not None:
            logger.debug("Replacing currency field adapter for %r", field_id)
            previous.detach()
        return adapter

    def get(self, field_id: Hashable) -> CurrencyFieldAdapter | None:
        """Adapter installed for field_id, if any."""
        with self._lock:
            return self._adapters.get(field_id)

    def remove(self, field_id: Hashable) -> CurrencyFieldAdapter | None:
        """Unregister and detach the adapter for field_id."""
        with self._lock:
            adapter = self._adapters.pop(field_id, None)
        if adapter is not None:
            adapter.detach()
        return adapter

    def clear(self) -> None:
        """Detach and drop every adapter."""
        with self._lock:
            adapters = list(self._adapters.values())
            self._adapters.clear()
        for adapter in adapters:
            adapter.detach()
