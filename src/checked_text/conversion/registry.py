"""Capability registry: the type-tag -> (parse, format) dispatch table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, Optional

from checked_text.errors import UnsupportedTypeError, report
from checked_text.runtime.telemetry import span

from .models import Capability


@dataclass(slots=True)
class RegistryStats:
    """Snapshot of what the registry can convert."""

    capability_count: int
    parsers: tuple[str, ...]
    formatters: tuple[str, ...]


class CapabilityConflictError(RuntimeError):
    """Raised when a tag is registered twice without ``replace=True``."""

    def __init__(self, capability: Capability, existing: Capability) -> None:
        super().__init__(
            f"Capability for '{capability.label}' is already registered"
        )
        self.capability = capability
        self.existing = existing


class ConversionRegistry:
    """Owns the capabilities the conversion engine dispatches on."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._capabilities: Dict[Hashable, Capability] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def register(self, capability: Capability, *, replace: bool = False) -> Capability:
        with span(
            "conversion::register",
            logger_name=self._logger_name,
            component="conversion",
            metadata={"key": capability.label},
        ) as handle:
            existing = self._capabilities.get(capability.key)
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.label)
                raise CapabilityConflictError(capability, existing)
            self._capabilities[capability.key] = capability
            self._touch()
            return capability

    def unregister(self, key: Hashable) -> Optional[Capability]:
        with span(
            "conversion::unregister",
            logger_name=self._logger_name,
            component="conversion",
            metadata={"key": getattr(key, "__name__", repr(key))},
        ):
            capability = self._capabilities.pop(key, None)
            if capability is not None:
                self._touch()
            return capability

    def get(self, key: Hashable) -> Capability:
        try:
            return self._capabilities[key]
        except (KeyError, TypeError):
            report(
                UnsupportedTypeError(
                    f"No conversion is registered for {getattr(key, '__name__', repr(key))}"
                )
            )

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._capabilities
        except TypeError:
            return False

    def formatter_for(self, value_type: type) -> Optional[Capability]:
        """Most specific capability with a format function along the MRO."""

        for klass in value_type.__mro__:
            capability = self._capabilities.get(klass)
            if capability is not None and capability.format is not None:
                return capability
        return None

    def iter_capabilities(self) -> Iterator[Capability]:
        yield from self._capabilities.values()

    def stats(self) -> RegistryStats:
        capabilities = list(self._capabilities.values())
        return RegistryStats(
            capability_count=len(capabilities),
            parsers=tuple(sorted(c.label for c in capabilities if c.parse)),
            formatters=tuple(sorted(c.label for c in capabilities if c.format)),
        )

    def _touch(self) -> None:
        self._revision += 1


__all__ = ["CapabilityConflictError", "ConversionRegistry", "RegistryStats"]
