"""
Views for Digiflazz webhook callbacks.
"""

import logging
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .config import config
from .exceptions import ConfigurationError, SignatureMismatchError, WebhookError
from .signals import webhook_received
from .webhooks import verify_and_parse_webhook

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def webhook_callback(request):
    """
    Handle Digiflazz webhook notifications.
    Receivers of `webhook_received` process the verified payload.
    """
    try:
        verified = verify_and_parse_webhook(
            request.body,
            dict(request.headers),
            config.webhook_secret
        )
    except ConfigurationError as e:
        logger.error(f"Webhook secret misconfigured: {e.message}")
        return JsonResponse({'error': 'Webhook not configured'}, status=500)
    except SignatureMismatchError:
        logger.warning("Invalid webhook signature")
        return JsonResponse({'error': 'Invalid signature'}, status=401)
    except WebhookError as e:
        logger.warning(f"Rejected webhook ({type(e).__name__}): {e.message}")
        return JsonResponse({'error': e.message}, status=400)
    
    logger.info(f"Received Digiflazz webhook: {verified.event.value}")
    webhook_received.send(
        sender=webhook_callback,
        event=verified.event,
        payload=verified.payload
    )
    return JsonResponse({'status': 'received'})
