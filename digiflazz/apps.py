from django.apps import AppConfig


class DigiflazzAppConfig(AppConfig):
    name = 'digiflazz'
    verbose_name = 'Digiflazz'
