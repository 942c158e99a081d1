from django.apps import AppConfig

class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dealerdesk.accounts'

    def ready(self):
        import dealerdesk.accounts.signals
