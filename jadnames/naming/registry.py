from __future__ import annotations
import logging
from collections.abc import Iterator

from ..types import TypeCategory, parse_type
from .holder import Holder


_l = logging.getLogger(__name__)


# (key, starting index, skip zero suffix, candidate names)
BASELINE_FAMILIES = (
    ("int", 0, True, ("i", "j", "k", "l")),
    ("byte", 0, False, ("b",)),
    ("char", 0, False, ("c",)),
    ("short", 1, False, ("short",)),
    ("boolean", 0, True, ("flag",)),
    ("double", 0, False, ("d",)),
    ("float", 0, True, ("f",)),
    ("File", 1, True, ("file",)),
    ("String", 0, True, ("s",)),
    ("Class", 0, True, ("oclass",)),
    ("Long", 0, True, ("olong",)),
    ("Byte", 0, True, ("obyte",)),
    ("Short", 0, True, ("oshort",)),
    ("Boolean", 0, True, ("obool",)),
    ("Package", 0, True, ("opackage",)),
    ("Enum", 0, True, ("oenum",)),
)

BASELINE_REMAP = {
    "long": "int",
}


class TypeCounterRegistry:
    """
    Maps canonical type keys to the naming counter of their family, and raw type strings to families they are an
    alias of. One registry backs one naming scope.
    """

    __slots__ = (
        "_holders",
        "_remap",
    )

    def __init__(self, baseline: bool = True):
        self._holders: dict[str, Holder] = {}
        self._remap: dict[str, str] = {}
        if baseline:
            for key, index, skip_zero, names in BASELINE_FAMILIES:
                self._holders[key] = Holder(index, skip_zero, names)
            self._remap.update(BASELINE_REMAP)

    def __repr__(self):
        return f"<TypeCounterRegistry with {len(self._holders)} families>"

    def __contains__(self, key):
        return key in self._holders

    def __getitem__(self, key) -> Holder:
        return self._holders[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._holders)

    def __len__(self):
        return len(self._holders)

    @property
    def remap_table(self) -> dict[str, str]:
        return dict(self._remap)

    def copy(self) -> TypeCounterRegistry:
        o = TypeCounterRegistry(baseline=False)
        o._holders = {k: h.copy() for k, h in self._holders.items()}
        o._remap = dict(self._remap)
        return o

    def register(self, key: str, holder: Holder) -> None:
        self._holders[key] = holder

    def remap(self, raw_type: str, key: str) -> None:
        """
        Make `raw_type` share the naming family registered under `key`.
        """
        if key not in self._holders:
            raise KeyError(f"No naming family registered under {key!r}")
        self._remap[raw_type] = key

    def _resolve_key(self, raw_type: str) -> str | None:
        parsed = parse_type(raw_type)
        key = parsed.canonical

        if key in self._holders:
            return key
        lowered = key.lower()
        if lowered in self._holders:
            return lowered
        for alias in (raw_type, key):
            target = self._remap.get(alias)
            if target is not None and target in self._holders:
                return target

        if parsed.category in (TypeCategory.REFERENCE, TypeCategory.ARRAY):
            synthesized = parsed.array_normalized.lower()
            if synthesized not in self._holders:
                name = parsed.base.lower()
                if parsed.is_array:
                    name = "a" + name
                _l.debug("Registering naming family %r for type %r.", synthesized, raw_type)
                self._holders[synthesized] = Holder(0, True, (name,))
            return synthesized

        return None

    def lookup_or_create(self, raw_type: str) -> Holder | None:
        """
        Find the naming family of a type, registering a new one for reference and array types that have none yet.

        :param raw_type:    The type as printed by the decompiler.
        :return:            The naming family, or None if the type cannot be given one.
        """
        key = self._resolve_key(raw_type)
        if key is None:
            return None
        return self._holders[key]

    def next_name(self, raw_type: str) -> str:
        """
        Hand out the next name for a variable of the given type.

        Types that belong to no family and cannot be given one (lowercase names that are not primitives) are named
        after their lowercased canonical form, without any numbering. Two such variables of the same type get the same
        name.
        """
        holder = self.lookup_or_create(raw_type)
        if holder is None:
            name = parse_type(raw_type).canonical.lower()
            _l.debug("No naming family for type %r, falling back to %r.", raw_type, name)
            return name
        return holder.next_name()
