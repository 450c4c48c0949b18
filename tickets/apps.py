from django.apps import AppConfig


class TicketsConfig(AppConfig):
    name = "tickets"
    verbose_name = "Tickets"

    def ready(self) -> None:
        from tickets.conf import get_ticketing_config

        # Validate TICKETING on startup.
        get_ticketing_config()
