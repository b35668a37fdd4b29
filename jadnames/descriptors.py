from __future__ import annotations

from archinfo.arch_soot import ArchSoot

from .access_flags import AccessFlags
from .errors import DescriptorError


# JVM base type characters
BASE_TYPES = {
    "Z": "boolean",
    "B": "byte",
    "C": "char",
    "S": "short",
    "I": "int",
    "J": "long",
    "F": "float",
    "D": "double",
    "V": "void",
}


def stack_size(type_name: str) -> int:
    """
    Number of local variable slots a value of the given type takes. Values whose native counterpart is 64-bit wide
    (long and double) take two slots; void takes none.

    :param type_name:   A type in source syntax, e.g. "long" or "java.lang.String[]".
    """
    if type_name == "void":
        return 0
    if type_name.endswith("[]"):
        return 1
    return 2 if ArchSoot.sizeof.get(type_name, 32) == 64 else 1


def _decode_field_type(descriptor: str, pos: int) -> tuple[str, int]:
    start = pos
    dims = 0
    while pos < len(descriptor) and descriptor[pos] == "[":
        dims += 1
        pos += 1
    if pos >= len(descriptor):
        raise DescriptorError(f"Truncated type at offset {start} in descriptor {descriptor!r}")

    ch = descriptor[pos]
    if ch == "L":
        end = descriptor.find(";", pos)
        if end == -1 or end == pos + 1:
            raise DescriptorError(f"Unterminated class type at offset {pos} in descriptor {descriptor!r}")
        base = descriptor[pos + 1 : end].replace("/", ".")
        pos = end + 1
    elif ch in BASE_TYPES:
        base = BASE_TYPES[ch]
        pos += 1
    else:
        raise DescriptorError(f"Unexpected character {ch!r} at offset {pos} in descriptor {descriptor!r}")

    if base == "void" and dims:
        raise DescriptorError(f"Array of void in descriptor {descriptor!r}")
    return base + "[]" * dims, pos


class MethodDescriptor:
    """
    A parsed JVM method descriptor.
    """

    __slots__ = (
        "descriptor",
        "params",
        "ret",
    )

    def __init__(self, descriptor: str, params: tuple[str, ...], ret: str):
        self.descriptor = descriptor
        self.params = params
        self.ret = ret

    def __repr__(self):
        return f"<MethodDescriptor ({', '.join(self.params)}) -> {self.ret}>"

    def __eq__(self, other):
        return isinstance(other, MethodDescriptor) and self.params == other.params and self.ret == other.ret

    def __hash__(self):
        return hash((MethodDescriptor, self.params, self.ret))

    @property
    def param_slots(self) -> int:
        return sum(stack_size(p) for p in self.params)


def parse_method_descriptor(descriptor: str) -> MethodDescriptor:
    """
    Parse a JVM method descriptor, such as "(IJ[Ljava/lang/String;)V".

    :param descriptor:  The descriptor string.
    :return:            The parsed descriptor.
    :raises DescriptorError: if the descriptor is malformed.
    """
    if not descriptor or descriptor[0] != "(":
        raise DescriptorError(f"Method descriptor must start with '(': {descriptor!r}")

    params = []
    pos = 1
    while True:
        if pos >= len(descriptor):
            raise DescriptorError(f"Missing ')' in descriptor {descriptor!r}")
        if descriptor[pos] == ")":
            pos += 1
            break
        param, pos = _decode_field_type(descriptor, pos)
        if param == "void":
            raise DescriptorError(f"void parameter in descriptor {descriptor!r}")
        params.append(param)

    ret, pos = _decode_field_type(descriptor, pos)
    if pos != len(descriptor):
        raise DescriptorError(f"Trailing characters after return type in descriptor {descriptor!r}")
    return MethodDescriptor(descriptor, tuple(params), ret)


class MethodInfo:
    """
    The method a naming provider works on: its access flags and its descriptor.

    The descriptor is only parsed when the parameter layout is first needed, so a malformed descriptor surfaces from
    the naming call that depends on it.
    """

    __slots__ = (
        "access_flags",
        "descriptor",
        "name",
        "class_name",
        "_parsed",
    )

    def __init__(self, access_flags: int, descriptor: str, name: str | None = None, class_name: str | None = None):
        self.access_flags = AccessFlags(access_flags)
        self.descriptor = descriptor
        self.name = name
        self.class_name = class_name
        self._parsed: MethodDescriptor | None = None

    def __repr__(self):
        if self.class_name is not None:
            return f"<MethodInfo {self.class_name}.{self.name}{self.descriptor}>"
        return f"<MethodInfo {self.name}{self.descriptor}>"

    @property
    def is_static(self) -> bool:
        return AccessFlags.STATIC in self.access_flags

    @property
    def parsed_descriptor(self) -> MethodDescriptor:
        if self._parsed is None:
            self._parsed = parse_method_descriptor(self.descriptor)
        return self._parsed

    @property
    def parameter_slot_count(self) -> int:
        """
        Number of local variable slots taken by the receiver (for instance methods) and the formal parameters.
        """
        count = 0 if self.is_static else 1
        return count + self.parsed_descriptor.param_slots
