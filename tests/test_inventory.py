import pytest

from quadplay.inventory import DEFAULT_SLOT_LABELS, Fit, Inventory, Refit, Unfit


def test_default_slots_are_empty_and_labelled():
    inventory = Inventory()
    assert [slot.label for slot in inventory.slots] == list(DEFAULT_SLOT_LABELS)
    assert all(slot.item is None for slot in inventory.slots)
    assert len({slot.id for slot in inventory.slots}) == len(DEFAULT_SLOT_LABELS)


def test_buy_appends_named_item():
    inventory = Inventory()
    assert inventory.buy(3) == "Item 3"
    inventory.buy(7)
    assert inventory.items == ["Item 3", "Item 7"]


def test_fit_puts_item_in_slot_and_keeps_inventory():
    inventory = Inventory()
    item = inventory.buy(2)
    slot_id = inventory.slots[0].id
    inventory.apply(Fit(target_slot=slot_id, item=item))
    assert inventory.slot_item(slot_id) == item
    assert inventory.items == [item]


def test_unfit_clears_slot():
    inventory = Inventory()
    slot_id = inventory.slots[1].id
    inventory.set_item(slot_id, "Item 1")
    inventory.apply(Unfit(target_slot=slot_id))
    assert inventory.slot_item(slot_id) is None


def test_refit_moves_item():
    inventory = Inventory()
    origin = inventory.slots[0].id
    target = inventory.slots[4].id
    inventory.set_item(origin, "Item 5")
    inventory.apply(Refit(target_slot=target, origin_slot=origin))
    assert inventory.slot_item(target) == "Item 5"
    assert inventory.slot_item(origin) is None


def test_refit_from_unknown_origin_clears_target():
    inventory = Inventory()
    target = inventory.slots[2].id
    inventory.set_item(target, "Item 9")
    inventory.apply(Refit(target_slot=target, origin_slot=-1))
    assert inventory.slot_item(target) is None


def test_set_item_on_unknown_slot_is_ignored():
    inventory = Inventory()
    inventory.set_item(-5, "Item 1")
    assert all(slot.item is None for slot in inventory.slots)


def test_slot_item_unknown_slot_raises():
    inventory = Inventory()
    with pytest.raises(KeyError):
        inventory.slot_item(-5)


def test_apply_rejects_unknown_command():
    inventory = Inventory()
    with pytest.raises(TypeError):
        inventory.apply("fit")


def test_custom_labels():
    inventory = Inventory(["Head", "Hands"])
    assert [slot.label for slot in inventory.slots] == ["Head", "Hands"]