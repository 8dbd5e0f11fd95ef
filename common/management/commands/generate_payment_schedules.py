"""
Management command to generate payment schedules for active contracts that
have none yet.

Usage:
    python manage.py generate_payment_schedules
    python manage.py generate_payment_schedules --dry-run
    python manage.py generate_payment_schedules --contract 42

Can be added to crontab to run automatically:
    0 1 * * * cd /path/to/project && python manage.py generate_payment_schedules
"""

from django.core.management.base import BaseCommand
from core.exceptions import ConflictError
from contracts.services import ContractService


class Command(BaseCommand):
    help = 'Generate monthly payment schedules for active contracts without payments'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be created without actually creating records',
        )
        parser.add_argument(
            '--contract',
            type=int,
            help='Only process the contract with this id',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        service = ContractService()

        self.stdout.write(f"\n{'='*60}")
        self.stdout.write("  PAYMENT SCHEDULE GENERATION")
        self.stdout.write(f"{'='*60}\n")

        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - No records will be created\n"))

        contracts = service.contract_repo.without_payments().order_by('id')
        if options['contract'] is not None:
            contracts = contracts.filter(id=options['contract'])

        total_contracts = contracts.count()
        created_contracts = 0
        created_payments = 0
        skipped = 0

        self.stdout.write(f"Found {total_contracts} active contracts without payments\n")

        for contract in contracts:
            label = f"{contract.contract_number} ({contract.property.title} / {contract.tenant.full_name})"

            if dry_run:
                count = len(service.build_schedule(contract))
            else:
                try:
                    count = len(service.generate_payment_schedule(contract.id))
                except ConflictError:
                    # Another run generated this schedule in the meantime
                    skipped += 1
                    self.stdout.write(f"  - {label} - Already has payments")
                    continue

            created_contracts += 1
            created_payments += count
            self.stdout.write(
                self.style.SUCCESS(f"  + {label} - {count} monthly payments of {contract.monthly_rent}")
            )

        # Summary
        self.stdout.write(f"\n{'='*60}")
        self.stdout.write("  SUMMARY")
        self.stdout.write(f"{'='*60}")
        self.stdout.write(f"  Contracts found: {total_contracts}")
        self.stdout.write(f"  Skipped: {skipped}")

        if dry_run:
            self.stdout.write(self.style.WARNING(
                f"  Would create: {created_payments} payments for {created_contracts} contracts"))
        else:
            self.stdout.write(self.style.SUCCESS(
                f"  Created: {created_payments} payments for {created_contracts} contracts"))

        self.stdout.write(f"{'='*60}\n")
