"""SmartCare Patient Billing.

Console patient admission and billing with department notifications.
"""

__version__ = "0.1.0"
