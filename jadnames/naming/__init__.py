from __future__ import annotations

from .holder import Holder
from .registry import TypeCounterRegistry, BASELINE_FAMILIES, BASELINE_REMAP
from .provider import VariableNameProvider, VariableNamingFactory, ParameterNaming, parameter_naming_strategy
from .jad import JADNameProvider, JADNameProviderFactory
from .scopes import NamingScopes
from . import options


__all__ = (
    "BASELINE_FAMILIES",
    "BASELINE_REMAP",
    "Holder",
    "JADNameProvider",
    "JADNameProviderFactory",
    "NamingScopes",
    "ParameterNaming",
    "TypeCounterRegistry",
    "VariableNameProvider",
    "VariableNamingFactory",
    "options",
    "parameter_naming_strategy",
)
