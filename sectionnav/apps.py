from django.apps import AppConfig


class SectionNavConfig(AppConfig):
    name = "sectionnav"
    verbose_name = "Section navigation"
