"""
Management command to check the Digiflazz deposit balance.
"""

from django.core.management.base import BaseCommand, CommandError
from digiflazz.client import DigiflazzClient
from digiflazz.exceptions import DigiflazzException


class Command(BaseCommand):
    help = 'Check Digiflazz deposit balance and credentials'
    
    def add_arguments(self, parser):
        parser.add_argument(
            '--price-list',
            action='store_true',
            help='Also fetch the prepaid price list and report its size'
        )
    
    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS('\n=== Digiflazz Balance ===\n'))
        
        try:
            client = DigiflazzClient()
            balance = client.check_balance()
            self.stdout.write(self.style.SUCCESS(f"Deposit: {balance.get('deposit')}"))
            
            if options['price_list']:
                products = client.price_list()
                self.stdout.write(f"Prepaid products: {len(products or [])}")
        except DigiflazzException as e:
            raise CommandError(f"Balance check failed: {e.message}")
