from django.apps import AppConfig


class RazorpayXAppConfig(AppConfig):
    name = 'razorpayx'
    verbose_name = 'RazorpayX Payouts'
