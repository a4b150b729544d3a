"""Inventory and equipment slots with fit, unfit and refit commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

DEFAULT_SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """An equipment slot that holds at most one item."""

    id: int
    label: str
    item: Optional[str] = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an inventory item into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move the item of one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Union[Unfit, Fit, Refit]


class Inventory:
    """Bought items plus a fixed set of labelled slots."""

    def __init__(self, slot_labels: Iterable[str] = DEFAULT_SLOT_LABELS) -> None:
        self.items: list[str] = []
        self.slots: list[Slot] = [
            Slot(id=slot_id, label=label) for slot_id, label in enumerate(slot_labels, start=1)
        ]

    def _find(self, slot_id: int) -> Optional[Slot]:
        return next((slot for slot in self.slots if slot.id == slot_id), None)

    def buy(self, index: int) -> str:
        """Add shop item number index to the inventory and return its name."""
        item = f"Item {index}"
        self.items.append(item)
        return item

    def set_item(self, slot_id: int, item: Optional[str]) -> None:
        """Put item (or nothing) into a slot; unknown slots are ignored."""
        slot = self._find(slot_id)
        if slot is not None:
            slot.item = item

    def slot_item(self, slot_id: int) -> Optional[str]:
        """Item held by a slot; KeyError if there is no such slot."""
        slot = self._find(slot_id)
        if slot is None:
            raise KeyError(slot_id)
        return slot.item

    def apply(self, command: FittingCommand) -> None:
        """Carry out a fitting command."""
        if isinstance(command, Unfit):
            self.set_item(command.target_slot, None)
        elif isinstance(command, Fit):
            self.set_item(command.target_slot, command.item)
        elif isinstance(command, Refit):
            origin = self._find(command.origin_slot)
            origin_item = origin.item if origin is not None else None
            self.set_item(command.target_slot, origin_item)
            self.set_item(command.origin_slot, None)
        else:
            raise TypeError(f"unknown fitting command: {command!r}")