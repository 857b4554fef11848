from django.apps import AppConfig


class CanvasBuilderConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'canvas_builder'
    verbose_name = 'Canvas Flutter Builder'
