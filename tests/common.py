from __future__ import annotations

from jadnames import AccessFlags, MethodInfo, VarVersionPair


def static_method(descriptor: str = "()V", name: str = "run") -> MethodInfo:
    return MethodInfo(AccessFlags.PUBLIC | AccessFlags.STATIC, descriptor, name=name, class_name="Example")


def instance_method(descriptor: str = "()V", name: str = "run", flags: int = AccessFlags.PUBLIC) -> MethodInfo:
    return MethodInfo(flags, descriptor, name=name, class_name="Example")


def local_vars(*types: str, start: int = 0) -> dict[VarVersionPair, str]:
    """
    One variable per type, in consecutive slots starting at `start`.
    """
    return {VarVersionPair(start + i, 0): t for i, t in enumerate(types)}
