"""In-progress table row built up from annotation lines."""

from milu.env_docs.formatting import render_row
from milu.env_docs.patterns import VALUE_SEPARATOR
from milu.env_docs.schema import EnvDocRow, FieldSlot


class FieldAccumulator:
    """Slot -> text mapping for the row currently being assembled.

    Repeated contributions to one slot are joined with a comma in the order
    they were added.  Values are passed through untouched.
    """

    def __init__(self) -> None:
        self._data: dict[FieldSlot, str] = {}

    def add(self, slot: FieldSlot, value: str) -> None:
        """Set the slot, or append ',value' if it already holds something."""
        if slot in self._data:
            self._data[slot] = self._data[slot] + VALUE_SEPARATOR + value
        else:
            self._data[slot] = value

    def get(self, slot: FieldSlot) -> str | None:
        return self._data.get(slot)

    def clear(self) -> None:
        self._data.clear()

    def snapshot(self) -> EnvDocRow:
        """Return the current contents as a row model."""
        return EnvDocRow.from_slots(self._data)

    def render(self) -> str:
        """Render the current contents as one markdown table row."""
        return render_row(self.snapshot())

    def __len__(self) -> int:
        return len(self._data)
