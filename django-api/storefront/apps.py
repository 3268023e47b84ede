from django.apps import AppConfig

from storefront.logging_utils import get_storefront_logger

logger = get_storefront_logger("apps")


class StorefrontAppConfig(AppConfig):
    name = "storefront"
    verbose_name = "Campaign slot storefront"

    def ready(self) -> None:
        from storefront.conf import StorefrontSettings
        from storefront.container import build_storefront

        app_settings = StorefrontSettings.from_django_settings()
        self.storefront = build_storefront(
            audit_log_capacity=app_settings.audit_log_capacity,
            admin_rate_limit_requests=app_settings.admin_rate_limit_requests,
            admin_rate_limit_window_seconds=app_settings.admin_rate_limit_window_seconds,
        )
        if not app_settings.admin_token.strip():
            logger.error("ADMIN_TOKEN is not configured; admin endpoints will refuse requests")
        if app_settings.seed_on_startup:
            result = self.storefront.seed_loader.run(client_ip="startup")
            logger.info("Startup seed loaded %s rows", result.rows_total)
