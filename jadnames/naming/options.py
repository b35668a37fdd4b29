# naming options
from __future__ import annotations
from collections import defaultdict
from typing import Any


class NamingOption:
    """
    Describes a naming option.
    """

    def __init__(
        self,
        name,
        description,
        value_type,
        cls,
        param,
        category="General",
        default_value=None,
    ):
        self.NAME = name
        self.DESCRIPTION = description
        self.value_type = value_type
        self.cls = cls
        self.param = param
        self.category = category
        self.default_value = default_value

    def __repr__(self):
        return f"<NamingOption [{self.category}] {self.NAME} ({self.cls}.{self.param})>"


O = NamingOption

options = [
    O(
        "Rename parameters",
        "Give method parameters JAD-style names as well, instead of keeping the names they already have. Parameter "
        "names are computed once per method and stay stable across queries.",
        bool,
        "provider",
        "rename_parameters",
        category="Parameters",
        default_value=False,
    ),
]

options_by_category = defaultdict(list)
PARAM_TO_OPTION = {}

for o in options:
    options_by_category[o.category].append(o)
    PARAM_TO_OPTION[o.param] = o


#
# Option Helpers
#


def get_option(param: str) -> NamingOption:
    """
    :raises KeyError: if there is no option for `param`.
    """
    return PARAM_TO_OPTION[param]


def get_default_options() -> dict[str, Any]:
    return {o.param: o.default_value for o in options}
