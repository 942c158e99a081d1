"""
Stock bookkeeping driven by InventoryTransaction signals.
"""
import pytest

from dealerdesk.inventory.models import InventoryTransaction, Motorcycle

pytestmark = pytest.mark.integration


def _record(motorcycle, quantity, kind=InventoryTransaction.Type.ADJUSTMENT):
    return InventoryTransaction.objects.create(motorcycle=motorcycle, transaction_type=kind, quantity=quantity)


def test_purchase_adds_stock(motorcycle):
    _record(motorcycle, 5, InventoryTransaction.Type.PURCHASE)
    motorcycle.refresh_from_db()
    assert motorcycle.stock == 15
    assert motorcycle.status == Motorcycle.Status.IN_STOCK


def test_status_follows_reorder_point(motorcycle):
    _record(motorcycle, -5, InventoryTransaction.Type.SALE)
    motorcycle.refresh_from_db()
    assert motorcycle.status == Motorcycle.Status.LOW_STOCK

    _record(motorcycle, -5, InventoryTransaction.Type.SALE)
    motorcycle.refresh_from_db()
    assert motorcycle.stock == 0
    assert motorcycle.status == Motorcycle.Status.OUT_OF_STOCK

    _record(motorcycle, 6, InventoryTransaction.Type.RETURN)
    motorcycle.refresh_from_db()
    assert motorcycle.status == Motorcycle.Status.IN_STOCK


def test_discontinued_status_is_kept(motorcycle):
    motorcycle.status = Motorcycle.Status.DISCONTINUED
    motorcycle.save()

    _record(motorcycle, -9)
    motorcycle.refresh_from_db()
    assert motorcycle.stock == 1
    assert motorcycle.status == Motorcycle.Status.DISCONTINUED


def test_editing_a_transaction_does_not_reapply(motorcycle):
    entry = _record(motorcycle, 3)
    entry.notes = "corrected"
    entry.save()

    motorcycle.refresh_from_db()
    assert motorcycle.stock == 13
