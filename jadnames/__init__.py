# pylint: disable=wrong-import-position
from __future__ import annotations

__version__ = "1.0.0"

# let's set up some bootstrap logging
import logging

logging.getLogger("jadnames").addHandler(logging.NullHandler())
from .misc.loggers import Loggers

loggers = Loggers()
del Loggers
del logging

from .errors import JadNamesError, DescriptorError, NamingContextError
from .access_flags import AccessFlags
from .variables import VarVersionPair
from .types import THIS_TYPE, TypeCategory, ParsedType, canonicalize, parse_type
from .descriptors import MethodDescriptor, MethodInfo, parse_method_descriptor, stack_size
from .naming import (
    Holder,
    JADNameProvider,
    JADNameProviderFactory,
    NamingScopes,
    TypeCounterRegistry,
    VariableNameProvider,
    VariableNamingFactory,
)

# now that we have everything loaded, re-grab the list of loggers
loggers.load_all_loggers()


__all__ = (
    "THIS_TYPE",
    "AccessFlags",
    "DescriptorError",
    "Holder",
    "JADNameProvider",
    "JADNameProviderFactory",
    "JadNamesError",
    "MethodDescriptor",
    "MethodInfo",
    "NamingContextError",
    "NamingScopes",
    "ParsedType",
    "TypeCategory",
    "TypeCounterRegistry",
    "VarVersionPair",
    "VariableNameProvider",
    "VariableNamingFactory",
    "canonicalize",
    "loggers",
    "parse_method_descriptor",
    "parse_type",
    "stack_size",
)
