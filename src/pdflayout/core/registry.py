"""Registry for PDF-access backends, looked up by name."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pdflayout.backends.base import BasePdfSource


class _SourceRegistry:
    """Maps backend names to ``BasePdfSource`` subclasses and opens them."""

    def __init__(self) -> None:
        self._registry: dict[str, type[BasePdfSource]] = {}

    def register(self, name: str, cls: type[BasePdfSource]) -> None:
        self._registry[name] = cls

    def get(self, name: str) -> type[BasePdfSource]:
        if name not in self._registry:
            available = ", ".join(self._registry.keys())
            raise KeyError(f"Unknown backend '{name}'. Available: {available}")
        return self._registry[name]

    def create(self, name: str, file_path: str | Path, **kwargs) -> BasePdfSource:
        """Open ``file_path`` with the backend registered as ``name``."""
        return self.get(name)(file_path, **kwargs)

    def list(self) -> list[str]:
        return list(self._registry.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._registry


SourceRegistry = _SourceRegistry()
