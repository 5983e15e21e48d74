"""
RazorpayX client for Django

A typed binding for the RazorpayX payouts API.
"""

__version__ = "0.1.0"
