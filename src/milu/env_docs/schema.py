"""Column slots and the Pydantic model for one documented variable.

FieldSlot lists the eight output columns in table order.  It is kept separate
from LineKind because the default value column has no annotation line of its
own: it is split off the variable line.
"""

from enum import IntEnum

from pydantic import BaseModel


class FieldSlot(IntEnum):
    """Output table columns, in rendering order."""

    ENV_VARIABLE = 0
    RESPONSIBLE = 1
    TYPE = 2
    SECRET = 3
    POLICY = 4
    DEFAULT_VALUE = 5
    DESCRIPTION = 6
    DOCS = 7


class EnvDocRow(BaseModel):
    """One completed table row.  Unset columns are empty strings."""

    key: str = ""
    responsible: str = ""
    type: str = ""
    secret: str = ""
    policy: str = ""
    default_value: str = ""
    description: str = ""
    docs: str = ""

    @classmethod
    def from_slots(cls, values: dict[FieldSlot, str]) -> "EnvDocRow":
        """Build a row from a slot -> value mapping (missing slots stay empty)."""
        return cls(**{_SLOT_FIELDS[slot]: value for slot, value in values.items()})

    def cells(self) -> list[str]:
        """Return the cell values in FieldSlot order."""
        return [getattr(self, _SLOT_FIELDS[slot]) for slot in FieldSlot]


# Model field name for each slot
_SLOT_FIELDS: dict[FieldSlot, str] = {
    FieldSlot.ENV_VARIABLE: "key",
    FieldSlot.RESPONSIBLE: "responsible",
    FieldSlot.TYPE: "type",
    FieldSlot.SECRET: "secret",
    FieldSlot.POLICY: "policy",
    FieldSlot.DEFAULT_VALUE: "default_value",
    FieldSlot.DESCRIPTION: "description",
    FieldSlot.DOCS: "docs",
}
