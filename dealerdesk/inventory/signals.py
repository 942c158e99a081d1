from django.db import transaction
from django.db.models import F
from django.db.models.signals import post_save
from django.dispatch import receiver
import logging

from .models import InventoryTransaction, Motorcycle

logger = logging.getLogger(__name__)


@receiver(post_save, sender=InventoryTransaction)
def apply_transaction_to_stock(sender, instance, created, raw=False, **kwargs):
    """
    Apply a newly recorded transaction's quantity to the motorcycle's stock
    and recompute its stock status. Edits to existing transactions do not
    re-apply.
    """
    if not created or raw:
        return

    with transaction.atomic():
        Motorcycle.objects.filter(pk=instance.motorcycle_id).update(stock=F('stock') + instance.quantity)
        motorcycle = Motorcycle.objects.select_for_update().get(pk=instance.motorcycle_id)
        new_status = motorcycle.status_for_stock(motorcycle.stock)
        if motorcycle.status != Motorcycle.Status.DISCONTINUED and motorcycle.status != new_status:
            motorcycle.status = new_status
            motorcycle.save(update_fields=['status', 'updated_at'])

    logger.info(
        f"Stock for {motorcycle} is now {motorcycle.stock} ({motorcycle.status}) "
        f"after {instance.transaction_type} {instance.quantity:+d}"
    )
