"""Runtime values of reflang: integers and booleans. There is no implicit coercion between the two, so asking a value
for the wrong kind is a TypeMismatch.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from reflang.lang.error import TypeMismatch


class Value(ABC):
    """Superclass of all runtime values. Projections fail unless a subclass overrides them."""
    kind = "unknown"

    @abstractmethod
    def show(self):
        """Textual form of this value, as printed by the interpreter."""

    def as_int(self):
        raise TypeMismatch("integer", self.kind)

    def as_bool(self):
        raise TypeMismatch("boolean", self.kind)

    def __str__(self):
        return self.show()


@dataclass(frozen=True)
class IntValue(Value):
    num: int
    kind = "integer"

    def show(self):
        return str(self.num)

    def as_int(self):
        return self.num


@dataclass(frozen=True)
class BoolValue(Value):
    flag: bool
    kind = "boolean"

    def show(self):
        return "true" if self.flag else "false"

    def as_bool(self):
        return self.flag
