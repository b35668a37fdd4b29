from __future__ import annotations
import logging
from collections.abc import Iterator

import networkx

from ..descriptors import MethodInfo
from ..errors import NamingContextError
from ..misc.picklable_lock import PicklableRLock
from .jad import JADNameProviderFactory
from .provider import VariableNameProvider, VariableNamingFactory


_l = logging.getLogger(__name__)


class NamingScopes:
    """
    Keeps track of which method scope is nested in which, and hands out one name provider per method. The provider of
    a nested scope continues from the state its enclosing scope's provider has when the nested provider is created.

    Once a method has been named, discard() it. Its provider is released as soon as no nested scope is still waiting
    to continue from it, and the method leaves the scope graph once all its nested scopes have left as well.

    Edges of the scope graph go from the enclosing method to the nested one.
    """

    def __init__(self, factory: VariableNamingFactory | None = None):
        self.factory = factory if factory is not None else JADNameProviderFactory()
        self._graph = networkx.DiGraph()
        self._providers: dict[MethodInfo, VariableNameProvider] = {}
        # discarded methods that are still in the graph
        self._discarded: set[MethodInfo] = set()
        self._lock = PicklableRLock()

    def __contains__(self, method):
        return method in self._graph

    def __len__(self):
        return len(self._graph)

    def has_provider(self, method: MethodInfo) -> bool:
        return method in self._providers

    def add_method(self, method: MethodInfo, enclosing: MethodInfo | None = None) -> None:
        """
        Register a method scope.

        :param method:      The method.
        :param enclosing:   The method whose scope `method` is nested in, if any.
        :raises NamingContextError: if `method` already has a different enclosing scope, if it already has a provider
                                    that did not continue from `enclosing`, if `enclosing` was discarded and released
                                    its provider, or if the nesting would be circular.
        """
        with self._lock:
            if enclosing is None:
                self._graph.add_node(method)
                return

            current = self.enclosing(method) if method in self._graph else None
            if current is enclosing:
                return
            if current is not None:
                raise NamingContextError(f"{method!r} is already nested in {current!r}")
            if method in self._providers:
                raise NamingContextError(f"{method!r} is already being named, it cannot be nested in {enclosing!r}")
            if enclosing in self._discarded and enclosing not in self._providers:
                raise NamingContextError(f"{enclosing!r} was discarded, nothing is left to continue naming from")
            if method is enclosing or (
                method in self._graph and enclosing in self._graph and networkx.has_path(self._graph, method, enclosing)
            ):
                raise NamingContextError(f"Nesting {method!r} in {enclosing!r} would be circular")

            self._graph.add_edge(enclosing, method)

    def enclosing(self, method: MethodInfo) -> MethodInfo | None:
        preds = list(self._graph.predecessors(method))
        return preds[0] if preds else None

    def nested(self, method: MethodInfo) -> list[MethodInfo]:
        return list(self._graph.successors(method))

    def methods(self) -> Iterator[MethodInfo]:
        """
        All method scopes, each enclosing scope before the scopes nested in it.
        """
        return iter(list(networkx.topological_sort(self._graph)))

    def provider(self, method: MethodInfo) -> VariableNameProvider:
        """
        Get the name provider of a method, creating it on first access. Unknown methods are registered as top-level
        scopes.

        :raises NamingContextError: if the method was discarded and its provider released.
        """
        with self._lock:
            existing = self._providers.get(method)
            if existing is not None:
                return existing
            if method in self._discarded:
                raise NamingContextError(f"{method!r} was discarded")

            if method not in self._graph:
                self._graph.add_node(method)

            provider = self.factory.create(method)
            parent_method = self.enclosing(method)
            if parent_method is not None:
                provider.add_parent_context(self.provider(parent_method))
            self._providers[method] = provider
            _l.debug("Created %r.", provider)

            if parent_method is not None:
                self._release(parent_method)
            return provider

    def discard(self, method: MethodInfo) -> None:
        """
        Mark a method as named. Unknown methods are ignored.
        """
        with self._lock:
            if method not in self._graph:
                return
            self._discarded.add(method)
            self._release(method)

    def _waits_for_enclosing(self, method: MethodInfo) -> bool:
        return method not in self._providers and method not in self._discarded

    def _release(self, method: MethodInfo) -> None:
        if method not in self._discarded:
            return
        nested = self.nested(method)
        if any(self._waits_for_enclosing(n) for n in nested):
            return

        if self._providers.pop(method, None) is not None:
            _l.debug("Released the provider of %r.", method)
        if nested:
            return

        parent_method = self.enclosing(method)
        self._graph.remove_node(method)
        self._discarded.discard(method)
        if parent_method is not None:
            self._release(parent_method)
