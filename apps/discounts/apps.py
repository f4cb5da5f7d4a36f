from django.apps import AppConfig


class DiscountsConfig(AppConfig):
    name = 'apps.discounts'
    verbose_name = 'Discount codes'
