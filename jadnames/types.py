from __future__ import annotations
from enum import Enum
from typing import NamedTuple

from archinfo.arch_soot import ArchSoot


# the type the decompiler reports for the receiver of an instance method
THIS_TYPE = "this"

ARRAY_MARKER = "[]"
VARARGS_MARKER = "..."
GENERIC_MARKER = "<"
QUALIFIER_SEPARATOR = "."


class TypeCategory(Enum):
    """
    Structural category of a type, as far as naming is concerned.
    """

    PRIMITIVE = "primitive"
    REFERENCE = "reference"
    ARRAY = "array"
    # lowercase non-primitive names, the receiver sentinel, empty strings...
    OPAQUE = "opaque"


def _strip_suffixes(s: str, dims: int, varargs: bool) -> tuple[str, int, bool]:
    while True:
        if s.endswith(ARRAY_MARKER):
            s = s[: -len(ARRAY_MARKER)]
            dims += 1
        elif s.endswith(VARARGS_MARKER):
            s = s[: -len(VARARGS_MARKER)]
            varargs = True
        else:
            return s, dims, varargs


class ParsedType(NamedTuple):
    """
    A surface-syntax type broken down into its simple name, its array dimensions, and whether it is a varargs type.
    """

    base: str
    dims: int = 0
    varargs: bool = False

    @property
    def is_array(self) -> bool:
        return self.dims > 0 or self.varargs

    @property
    def category(self) -> TypeCategory:
        if self.is_array:
            return TypeCategory.ARRAY
        if self.base in ArchSoot.primitive_types:
            return TypeCategory.PRIMITIVE
        first = self.base[:1]
        if first.isascii() and first.isupper():
            return TypeCategory.REFERENCE
        return TypeCategory.OPAQUE

    @property
    def canonical(self) -> str:
        """
        The registry key form. Nested arrays collapse into a single array marker.
        """
        return self.base + (ARRAY_MARKER if self.dims else "") + (VARARGS_MARKER if self.varargs else "")

    @property
    def array_normalized(self) -> str:
        """
        The canonical form with varargs turned into an array marker.
        """
        return self.base + (ARRAY_MARKER if self.is_array else "")


def parse_type(raw_type: str) -> ParsedType:
    """
    Break a type string as printed by the decompiler (e.g. "java.util.List<String>[]" or "Bar...") into a ParsedType.

    Generic arguments are dropped and only the simple name after the last qualifier separator is kept. Array and
    varargs suffixes are recognized before qualifiers are stripped, so that the dots of a varargs marker are never
    taken for a qualifier separator.
    """
    s, dims, varargs = _strip_suffixes(raw_type, 0, False)

    idx = s.find(GENERIC_MARKER)
    if idx != -1:
        s = s[:idx]
        # suffixes hidden behind generic arguments, e.g. "Foo[][]<T>"
        s, dims, varargs = _strip_suffixes(s, dims, varargs)
    s = s[s.rfind(QUALIFIER_SEPARATOR) + 1 :]
    return ParsedType(s, dims, varargs)


def canonicalize(raw_type: str) -> str:
    """
    Normalize a type string into the key used to look up naming counters. Canonicalization is idempotent.

    >>> canonicalize("java.util.Map<String, Integer>")
    'Map'
    >>> canonicalize("int[][]")
    'int[]'
    """
    return parse_type(raw_type).canonical
