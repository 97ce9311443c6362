"""Page payload registry.

Maps a page name to a zero-argument loader returning a JSON-ready payload.
The built-in pages are registered by `services.pages`.
"""
from __future__ import annotations
from typing import Dict, Callable, Any, List

PageLoader = Callable[[], Dict[str, Any]]


class Registry:
    def __init__(self) -> None:
        self._loaders: Dict[str, PageLoader] = {}

    def register(self, name: str, loader: PageLoader) -> None:
        if name in self._loaders:
            raise ValueError(f"Loader already registered for {name}")
        self._loaders[name] = loader

    def page(self, name: str) -> Callable[[PageLoader], PageLoader]:
        """Decorator form of `register`."""
        def wrap(loader: PageLoader) -> PageLoader:
            self.register(name, loader)
            return loader
        return wrap

    def load(self, name: str) -> Dict[str, Any]:
        if name not in self._loaders:
            raise KeyError(f"No loader registered for {name}")
        return self._loaders[name]()

    def names(self) -> List[str]:
        return list(self._loaders)


PAGE_REGISTRY = Registry()
