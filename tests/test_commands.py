"""
Tests for the generate_payment_schedules management command.
"""
from io import StringIO

import pytest
from django.core.management import call_command

from payments.models import Payment


def _run(*args):
    out = StringIO()
    call_command('generate_payment_schedules', *args, stdout=out)
    return out.getvalue()


@pytest.mark.django_db
class TestGeneratePaymentSchedules:

    def test_dry_run_writes_nothing(self, contract):
        output = _run('--dry-run')
        assert "Would create: 4 payments for 1 contracts" in output
        assert Payment.objects.count() == 0

    def test_generates_missing_schedules(self, contract):
        output = _run()
        assert "Created: 4 payments for 1 contracts" in output
        assert Payment.objects.filter(contract=contract).count() == 4

    def test_second_run_finds_nothing(self, contract):
        _run()
        output = _run()
        assert "Found 0 active contracts without payments" in output
        assert Payment.objects.count() == 4

    def test_single_contract(self, contract, contract_service, contract_dto, make_property, make_tenant):
        from dataclasses import replace

        other = contract_service.create_contract(replace(
            contract_dto, property_id=make_property(title="Other").id, tenant_id=make_tenant().id,
        ))
        _run('--contract', str(other.id))

        assert Payment.objects.filter(contract=other).count() == 4
        assert not Payment.objects.filter(contract=contract).exists()

    def test_terminated_contracts_are_skipped(self, contract, contract_service):
        contract_service.terminate_contract(contract.id)
        assert "Found 0 active contracts" in _run()
