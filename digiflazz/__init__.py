"""
Digiflazz client for Django

Signed requests to the Digiflazz top-up API and verification of its webhooks.
"""

__version__ = "0.1.0"
