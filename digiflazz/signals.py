"""
Signals for webhook events.
"""
from django.dispatch import Signal

# Signal sent after an inbound webhook has been verified
# Provides arguments:
# - event: The WebhookEvent (create, update or ping)
# - payload: The transaction payload, or the whole body for ping
webhook_received = Signal()
