"""
Management command to trigger a Digiflazz webhook ping.
"""

from django.core.management.base import BaseCommand, CommandError
from digiflazz.client import DigiflazzClient
from digiflazz.exceptions import DigiflazzException


class Command(BaseCommand):
    help = 'Ask Digiflazz to send a ping event to a registered webhook'
    
    def add_arguments(self, parser):
        parser.add_argument(
            '--hook-id',
            type=str,
            required=True,
            help='Webhook ID from the Digiflazz dashboard'
        )
    
    def handle(self, *args, **options):
        hook_id = options['hook_id']
        self.stdout.write(f'Triggering ping for webhook {hook_id}...')
        
        try:
            result = DigiflazzClient().trigger_ping(hook_id)
        except DigiflazzException as e:
            raise CommandError(f"Ping failed: {e.message}")
        
        hook = result.get('hook') or {}
        self.stdout.write(self.style.SUCCESS(
            f"Ping sent. hook_id={result.get('hook_id')} url={hook.get('url')}"
        ))
