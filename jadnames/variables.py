from __future__ import annotations
from typing import NamedTuple


class VarVersionPair(NamedTuple):
    """
    Identifies one version of a local variable: the local variable slot it lives in, and the SSA version of the
    definition. Pairs sort by slot first and version second.
    """

    var: int
    version: int = 0

    def __repr__(self):
        return f"<Var {self.var}_{self.version}>"
