from __future__ import annotations
import logging
from collections.abc import Mapping

from sortedcontainers import SortedDict

from ..descriptors import MethodInfo
from ..errors import NamingContextError
from ..misc.picklable_lock import PicklableRLock
from ..types import THIS_TYPE, canonicalize
from ..variables import VarVersionPair
from .options import get_option
from .provider import VariableNameProvider, VariableNamingFactory
from .registry import TypeCounterRegistry


_l = logging.getLogger(__name__)


class JADNameProvider(VariableNameProvider):
    """
    Names variables the way the JAD decompiler does: after their type, with short mnemonics for common types (i, j, k,
    l for integers, s for strings, flag for booleans...) and numbered repeats once a family runs out of fresh names.

    Naming state (the counters of each type family) lives in the provider. A provider for a nested scope, such as a
    method of an anonymous class, can take over the state of its enclosing scope through add_parent_context(), so that
    names keep counting up across both instead of starting over.

    Every naming operation holds the provider's lock for its whole duration.
    """

    def __init__(self, rename_parameters: bool, method: MethodInfo):
        self.method = method
        self.rename_parameters = rename_parameters
        self._registry = TypeCounterRegistry()
        self._parameters: SortedDict = SortedDict()
        self._lock = PicklableRLock()

    def __repr__(self):
        return f"<JADNameProvider for {self.method!r}>"

    @property
    def registry(self) -> TypeCounterRegistry:
        """
        A copy of the naming state. Changing it does not affect the provider.
        """
        return self._snapshot()

    @property
    def parameter_names(self) -> dict[int, str]:
        """
        Names handed out to parameters so far, by slot.
        """
        with self._lock:
            return dict(self._parameters.items())

    def _snapshot(self) -> TypeCounterRegistry:
        with self._lock:
            return self._registry.copy()

    def add_parent_context(self, parent: VariableNameProvider) -> None:
        if not isinstance(parent, JADNameProvider):
            raise NamingContextError(f"Cannot continue naming from {parent!r}, it is not a JADNameProvider")

        # the parent lock is released before ours is taken, so two providers adopting each other cannot deadlock
        registry = parent._snapshot()
        with self._lock:
            self._registry = registry
        _l.debug("%r continues naming from %r.", self, parent)

    def remap(self, raw_type: str, key: str) -> None:
        """
        Make `raw_type` share the naming family registered under `key`.
        """
        with self._lock:
            self._registry.remap(raw_type, key)

    def _parameter_name(self, index: int, type_: str) -> str:
        name = self._parameters.get(index)
        if name is None:
            name = self._registry.next_name(type_)
            self._parameters[index] = name
        return name

    def rename(self, variables: Mapping[VarVersionPair, str]) -> dict[VarVersionPair, str]:
        with self._lock:
            params = self.method.parameter_slot_count

            result = {}
            for ver in sorted(variables):
                type_ = canonicalize(variables[ver])
                if type_ == THIS_TYPE:
                    continue
                if ver.var >= params:
                    result[ver] = self._registry.next_name(type_)
                elif self.rename_parameters:
                    result[ver] = self._parameter_name(ver.var, type_)

            _l.debug("Named %d of %d variables of %r.", len(result), len(variables), self.method)
            return result

    def rename_parameter(self, flags: int, type_: str, name: str, index: int) -> str:
        if not self.rename_parameters:
            return super().rename_parameter(flags, type_, name, index)
        with self._lock:
            return self._parameter_name(index, canonicalize(type_))


class JADNameProviderFactory(VariableNamingFactory):
    """
    Creates a JADNameProvider for each method.

    :ivar rename_parameters:    Whether the providers rename parameters. Defaults to the "rename_parameters" option.
    """

    def __init__(self, rename_parameters: bool | None = None):
        if rename_parameters is None:
            rename_parameters = get_option("rename_parameters").default_value
        self.rename_parameters = rename_parameters

    def create(self, method: MethodInfo) -> JADNameProvider:
        return JADNameProvider(self.rename_parameters, method)
