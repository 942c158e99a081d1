from django.apps import AppConfig

class InventoryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dealerdesk.inventory'

    def ready(self):
        import dealerdesk.inventory.signals
