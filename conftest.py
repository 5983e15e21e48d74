import django
from django.conf import settings


def pytest_configure(config):
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[
                "razorpayx",
            ],
            DATABASES={},
            RAZORPAYX_KEY_ID="rzp_test_key",
            RAZORPAYX_KEY_SECRET="rzp_test_secret",
            RAZORPAYX_ACCOUNT_NUMBER="7878780080316316",
            RAZORPAYX_API_BASE_URL="https://api.razorpay.com/v1",
            USE_TZ=True,
        )
        django.setup()
