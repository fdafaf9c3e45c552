from django.apps import AppConfig


class LogEventsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'log_events'
    verbose_name = '이벤트 기록'
