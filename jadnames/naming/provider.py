from __future__ import annotations
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING

from ..access_flags import BODYLESS

if TYPE_CHECKING:
    from ..descriptors import MethodInfo
    from ..variables import VarVersionPair


class ParameterNaming(Enum):
    """
    How a parameter is named when a provider does not rename parameters itself.
    """

    PASSTHROUGH = "passthrough"
    ABSTRACT = "abstract"


def parameter_naming_strategy(flags: int) -> ParameterNaming:
    """
    Abstract and native methods have no body to name parameters from, so their parameters go through the
    abstract-parameter hook. Everything else keeps the name it has.
    """
    if flags & BODYLESS:
        return ParameterNaming.ABSTRACT
    return ParameterNaming.PASSTHROUGH


class VariableNameProvider:
    """
    Names the local variables of one method.
    """

    def rename(self, variables: Mapping[VarVersionPair, str]) -> dict[VarVersionPair, str]:
        """
        Name a batch of variables.

        :param variables:   Variable versions and the types the decompiler inferred for them.
        :return:            New names of the variables that get one.
        """
        raise NotImplementedError

    def add_parent_context(self, parent: VariableNameProvider) -> None:
        """
        Continue naming from the state of an enclosing scope.
        """
        raise NotImplementedError

    def rename_abstract_parameter(self, name: str, index: int) -> str:  # pylint:disable=unused-argument,no-self-use
        return name

    def rename_parameter(self, flags: int, type_: str, name: str, index: int) -> str:  # pylint:disable=unused-argument
        """
        Name a single parameter.

        :param flags:   Access flags of the method the parameter belongs to.
        :param type_:   Type of the parameter.
        :param name:    The name the parameter has so far.
        :param index:   Local variable slot of the parameter.
        """
        if parameter_naming_strategy(flags) is ParameterNaming.ABSTRACT:
            return self.rename_abstract_parameter(name, index)
        return name


class VariableNamingFactory:
    """
    Creates the name provider of a method.
    """

    def create(self, method: MethodInfo) -> VariableNameProvider:
        raise NotImplementedError
