from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional

from flowinject.shared.context.base import AbstractContext
from flowinject.shared.context.view import ViewContext


class ContextProvider(ABC):
    """Maps a scope marker to the context that owns classes carrying it."""

    @abstractmethod
    def supported_annotation(self) -> Callable:
        ...

    @abstractmethod
    def get_context(self, view_context: Optional[ViewContext]) -> AbstractContext:
        ...


class ProviderRegistry:
    """Ordered list of context providers; the first one claiming a class wins."""

    def __init__(self, providers: Optional[List[ContextProvider]] = None):
        self._providers: List[ContextProvider] = list(providers or [])

    def register(self, provider: ContextProvider) -> ContextProvider:
        self._providers.append(provider)
        return provider

    @property
    def providers(self) -> List[ContextProvider]:
        return list(self._providers)

    def __iter__(self) -> Iterator[ContextProvider]:
        return iter(list(self._providers))

    def __len__(self) -> int:
        return len(self._providers)
