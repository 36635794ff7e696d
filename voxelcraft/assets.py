"""Caches of loaded assets that live as long as someone uses them."""

from __future__ import annotations

import weakref
from typing import Callable, Generic, Optional, TypeVar

from .util import read_binary_file

T = TypeVar("T")


def _reference(asset: T) -> Callable[[], Optional[T]]:
    try:
        return weakref.ref(asset)
    except TypeError:
        # Values such as bytes cannot be weakly referenced; keep them alive.
        return lambda: asset


class AssetRegistry(Generic[T]):
    """Loads assets by name and hands out the same object while it is alive."""

    def __init__(self, loader: Callable[[str], Optional[T]]) -> None:
        self._loader = loader
        self._registry: dict[str, Callable[[], Optional[T]]] = {}

    def has_asset(self, name: str) -> bool:
        """Return True if a live asset is registered under name."""
        reference = self._registry.get(name)
        return reference is not None and reference() is not None

    def remove(self, name: str) -> None:
        """Forget the asset registered under name, if any."""
        self._registry.pop(name, None)

    def get(self, name: str) -> Optional[T]:
        """Return the registered asset, loading it when absent or expired."""
        reference = self._registry.get(name)
        if reference is not None:
            asset = reference()
            if asset is not None:
                return asset

        asset = self._loader(name)
        if asset is not None:
            self._registry[name] = _reference(asset)
        return asset


class TextRegistry(AssetRegistry[bytes]):
    """Registry of raw file contents, keyed by path."""

    def __init__(self) -> None:
        super().__init__(read_binary_file)