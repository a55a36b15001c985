"""Environment model for reflang.

Storage lives in Slots: small mutable boxes holding one Value. An Environment is an immutable chain of named Cells
over those slots, innermost first:

```
<environment> ::= <empty>                   ; Environment()
                | <cell> <environment>      ; one prepended frame
<cell>        ::= value cell                ; owns a freshly made slot (VarDecl, by-value formal)
                | reference cell            ; shares the slot object of the cell it aliases (by-reference formal)
```

Extending an environment never touches the chain it extends, so an older handle keeps seeing exactly what it saw
before. Scopes are discarded by going back to the older handle; nothing is ever popped or removed, and a slot lives
only as long as some cell still holds it.
"""

from dataclasses import dataclass

from reflang.lang.error import UnboundVariable


class Slot:
    """Mutable box for one Value. Aliasing cells hold the same Slot object."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Slot({self.value})"


@dataclass(frozen=True)
class Cell:
    """Named handle to a Slot. A reference cell holds the same slot as the cell it aliases, so reads and writes
    through either one are visible through both.
    """
    name: str
    slot: Slot
    by_reference: bool = False

    def get(self):
        return self.slot.value

    def set(self, value):
        self.slot.value = value

    def __repr__(self):
        kind = "ref" if self.by_reference else "val"
        return f"Cell({kind} {self.name!r} -> {self.slot})"


class Environment:
    """Immutable singly-linked chain of Cells. Environment() is the empty environment."""

    def __init__(self, cell=None, rest=None):
        self.cell = cell
        self.rest = rest

    @property
    def empty(self):
        return self.cell is None

    def lookup(self, name):
        """Returns the innermost Cell bound to name (not a copy of its value). Raises UnboundVariable on a miss."""
        env = self
        while not env.empty:
            if env.cell.name == name:
                return env.cell
            env = env.rest
        raise UnboundVariable(name)

    def extend_value(self, name, value):
        """Returns a new environment with a value cell for name, owning a fresh slot that holds value."""
        return Environment(Cell(name, Slot(value)), self)

    def extend_reference(self, name, cell):
        """Returns a new environment with a reference cell for name, aliasing cell's slot."""
        return Environment(Cell(name, cell.slot, by_reference=True), self)

    def fresh(self, value):
        """Returns a free-standing cell that no environment binds. Used as a temporary for by-reference arguments
        that are not variables.
        """
        return Cell("", Slot(value))

    def new_frame(self):
        """Returns an empty environment. Procedure activations start from here."""
        return Environment()

    def names(self):
        """Visible names, innermost first. Shadowed bindings are left out."""
        seen = []
        env = self
        while not env.empty:
            if env.cell.name not in seen:
                seen.append(env.cell.name)
            env = env.rest
        return seen

    def __iter__(self):
        env = self
        while not env.empty:
            yield env.cell
            env = env.rest

    def __repr__(self):
        bindings = ", ".join(f"{cell.name}={cell.get()}" for cell in self)
        return f"Environment({bindings})"


def lookup(env, name):
    return env.lookup(name)


def extend_value(env, name, value):
    return env.extend_value(name, value)


def extend_reference(env, name, cell):
    return env.extend_reference(name, cell)


def get(cell):
    return cell.get()


def set(cell, value):
    cell.set(value)
