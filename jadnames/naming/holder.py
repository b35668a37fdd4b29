from __future__ import annotations
from collections.abc import Iterable


class Holder:
    """
    Naming counter of one type family: the index of the next name to hand out, whether the very first name goes
    without a numeric suffix, and the candidate base names to cycle through.
    """

    __slots__ = (
        "index",
        "skip_zero",
        "names",
    )

    def __init__(self, index: int, skip_zero: bool, names: Iterable[str]):
        names = list(names)
        if not names:
            raise ValueError("A naming family needs at least one candidate name")
        if index < 0:
            raise ValueError(f"Negative naming index {index}")
        self.index = index
        self.skip_zero = skip_zero
        self.names: list[str] = names

    def __repr__(self):
        return f"<Holder[{self.index}, {self.skip_zero}, {', '.join(self.names)}]>"

    def __eq__(self, other):
        return (
            isinstance(other, Holder)
            and self.index == other.index
            and self.skip_zero == other.skip_zero
            and self.names == other.names
        )

    __hash__ = None

    def copy(self) -> Holder:
        return Holder(self.index, self.skip_zero, list(self.names))

    def peek(self) -> str:
        """
        The name the next call to next_name() returns.
        """
        amount = len(self.names)
        idx = self.index
        if amount == 1:
            suffix = "" if idx == 0 and self.skip_zero else str(idx)
            return self.names[0] + suffix
        suffix = "" if idx < amount and self.skip_zero else str(idx // amount)
        return self.names[idx % amount] + suffix

    def next_name(self) -> str:
        name = self.peek()
        self.index += 1
        return name
