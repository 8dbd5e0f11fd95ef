"""
Tests for the JSON API: status codes, error bodies, pagination headers and filters.
"""
import pytest

from core.constants import PaymentStatus, PropertyStatus
from payments.models import Payment

API = "/api/v1"


def _contract_payload(prop, tenant, **extra):
    payload = {
        'property_id': prop.id,
        'tenant_id': tenant.id,
        'start_date': "2024-01-15",
        'end_date': "2024-04-15",
        'monthly_rent': "1000.00",
    }
    payload.update(extra)
    return payload


# =============================================================================
# Owners / Properties
# =============================================================================

@pytest.mark.django_db
class TestOwnerAPI:

    def test_create_and_retrieve(self, api_client):
        response = api_client.post(f"{API}/owners/", {
            'first_name': "Nour", 'last_name': "Salem", 'email': "nour@example.com", 'phone': "123",
        }, format='json')
        assert response.status_code == 201
        assert response.json()['version'] == 1

        detail = api_client.get(f"{API}/owners/{response.json()['id']}/")
        assert detail.status_code == 200
        assert detail.json()['full_name'] == "Nour Salem"

    def test_duplicate_email_is_400(self, api_client, owner):
        response = api_client.post(f"{API}/owners/", {
            'first_name': "A", 'last_name': "B", 'email': owner.email, 'phone': "1",
        }, format='json')
        assert response.status_code == 400
        assert response.json()['code'] == "DUPLICATE_EMAIL"

    def test_delete_with_properties_is_409(self, api_client, owner, prop):
        response = api_client.delete(f"{API}/owners/{owner.id}/")
        assert response.status_code == 409
        assert response.json()['code'] == "OWNER_HAS_PROPERTIES"

    def test_unknown_owner_is_404(self, api_client, db):
        assert api_client.get(f"{API}/owners/999999/").status_code == 404

    def test_stale_version_is_409(self, api_client, owner):
        first = api_client.patch(f"{API}/owners/{owner.id}/", {'phone': "1", 'version': 1}, format='json')
        assert first.status_code == 200
        assert first.json()['version'] == 2

        stale = api_client.patch(f"{API}/owners/{owner.id}/", {'phone': "2", 'version': 1}, format='json')
        assert stale.status_code == 409
        assert stale.json()['code'] == "CONCURRENCY_CONFLICT"

    def test_owner_properties(self, api_client, owner, make_property):
        make_property(title="First")
        make_property(title="Second")

        response = api_client.get(f"{API}/owners/{owner.id}/properties/")
        assert response.status_code == 200
        assert response['X-Total-Count'] == "2"
        assert {p['title'] for p in response.json()['results']} == {"First", "Second"}

    def test_properties_of_unknown_owner_is_404(self, api_client, db):
        assert api_client.get(f"{API}/owners/999999/properties/").status_code == 404


@pytest.mark.django_db
class TestPropertyAPI:

    def test_pagination_headers(self, api_client, make_property):
        for n in range(12):
            make_property(title=f"Flat {n}")

        response = api_client.get(f"{API}/properties/", {'page': 2, 'pageSize': 5})

        assert response.status_code == 200
        assert response['X-Total-Count'] == "12"
        assert response['X-Page'] == "2"
        assert response['X-Page-Size'] == "5"
        assert len(response.json()['results']) == 5

    def test_filters(self, api_client, make_property):
        make_property(title="Cheap", city="Giza", monthly_rent="500.00")
        make_property(title="Pricey", city="Cairo", monthly_rent="5000.00")

        response = api_client.get(f"{API}/properties/", {'minPrice': "1000", 'city': "cai"})
        assert [p['title'] for p in response.json()['results']] == ["Pricey"]

    def test_malformed_filter_is_400(self, api_client, db):
        response = api_client.get(f"{API}/properties/", {'minPrice': "lots"})
        assert response.status_code == 400
        assert response.json()['code'] == "INVALID_FILTER"

    def test_unknown_status_filter_is_400(self, api_client, db):
        response = api_client.get(f"{API}/properties/", {'status': "Sold"})
        assert response.status_code == 400

    def test_search_requires_query(self, api_client, db):
        response = api_client.get(f"{API}/properties/search/")
        assert response.status_code == 400

    def test_search(self, api_client, make_property):
        make_property(title="Garden villa")
        make_property(title="Studio")
        response = api_client.get(f"{API}/properties/search/", {'query': "garden"})
        assert response.status_code == 200
        assert response['X-Total-Count'] == "1"

    def test_delete_leased_property_is_409(self, api_client, contract, prop):
        response = api_client.delete(f"{API}/properties/{prop.id}/")
        assert response.status_code == 409

    def test_status_of_leased_property_is_409(self, api_client, contract, prop):
        response = api_client.patch(f"{API}/properties/{prop.id}/", {'status': "Available"}, format='json')
        assert response.status_code == 409
        prop.refresh_from_db()
        assert prop.status == PropertyStatus.RENTED

    def test_rented_status_on_free_property_is_409(self, api_client, prop):
        response = api_client.patch(f"{API}/properties/{prop.id}/", {'status': "Rented"}, format='json')
        assert response.status_code == 409
        assert response.json()['code'] == "INVALID_STATUS_TRANSITION"

    def test_status_to_maintenance(self, api_client, prop):
        response = api_client.patch(f"{API}/properties/{prop.id}/", {'status': "Maintenance"}, format='json')
        assert response.status_code == 200
        assert response.json()['status'] == PropertyStatus.MAINTENANCE


# =============================================================================
# Contracts / Payments
# =============================================================================

@pytest.mark.django_db
class TestContractAPI:

    def test_create_contract(self, api_client, prop, tenant):
        response = api_client.post(f"{API}/contracts/", _contract_payload(prop, tenant), format='json')

        assert response.status_code == 201
        body = response.json()
        assert body['status'] == "Active"
        assert body['contract_number'].startswith("CON-")
        prop.refresh_from_db()
        assert prop.status == PropertyStatus.RENTED

    def test_end_before_start_is_400(self, api_client, prop, tenant):
        payload = _contract_payload(prop, tenant, start_date="2024-05-01", end_date="2024-04-01")
        response = api_client.post(f"{API}/contracts/", payload, format='json')
        assert response.status_code == 400
        assert response.json()['code'] == "INVALID_END_DATE"

    def test_unknown_tenant_is_404(self, api_client, prop):
        response = api_client.post(f"{API}/contracts/", {
            'property_id': prop.id, 'tenant_id': 999999, 'start_date': "2024-01-01",
            'end_date': "2024-02-01", 'monthly_rent': "10",
        }, format='json')
        assert response.status_code == 404

    def test_generate_payments_then_conflict(self, api_client, contract):
        url = f"{API}/contracts/{contract.id}/generate-payments/"

        first = api_client.post(url)
        assert first.status_code == 201
        assert len(first.json()) == 4

        second = api_client.post(url)
        assert second.status_code == 409
        assert second.json()['code'] == "PAYMENTS_ALREADY_GENERATED"

    def test_terminate(self, api_client, contract):
        response = api_client.post(f"{API}/contracts/{contract.id}/terminate/",
                                   {'reason': "Moved abroad"}, format='json')
        assert response.status_code == 200
        assert response.json()['status'] == "Terminated"

    def test_contracts_cannot_be_deleted(self, api_client, contract):
        assert api_client.delete(f"{API}/contracts/{contract.id}/").status_code == 405

    def test_active_filter(self, api_client, contract):
        assert api_client.get(f"{API}/contracts/", {'active': "false"}).json()['count'] == 0
        assert api_client.get(f"{API}/contracts/", {'active': "true"}).json()['count'] == 1
        assert api_client.get(f"{API}/contracts/", {'active': "maybe"}).status_code == 400


@pytest.mark.django_db
class TestPaymentAPI:

    def test_mark_paid_and_delete_guard(self, api_client, contract, contract_service):
        payment = contract_service.generate_payment_schedule(contract.id)[0]

        paid = api_client.post(f"{API}/payments/{payment.id}/mark-paid/",
                               {'transaction_reference': "TX-9", 'payment_method': "Cash"}, format='json')
        assert paid.status_code == 200
        assert paid.json()['status'] == PaymentStatus.PAID

        again = api_client.post(f"{API}/payments/{payment.id}/mark-overdue/")
        assert again.status_code == 409

        deleted = api_client.delete(f"{API}/payments/{payment.id}/")
        assert deleted.status_code == 409
        assert Payment.objects.filter(id=payment.id).exists()

    def test_status_filter(self, api_client, contract, contract_service):
        payments = contract_service.generate_payment_schedule(contract.id)
        api_client.post(f"{API}/payments/{payments[0].id}/mark-overdue/")

        response = api_client.get(f"{API}/payments/", {'status': "Overdue"})
        assert response['X-Total-Count'] == "1"

    def test_month_filter(self, api_client, contract, contract_service):
        contract_service.generate_payment_schedule(contract.id)

        response = api_client.get(f"{API}/payments/", {'month': "2024-03"})
        assert response['X-Total-Count'] == "1"
        assert response.json()['results'][0]['due_date'] == "2024-03-15"

        assert api_client.get(f"{API}/payments/", {'month': "March"}).status_code == 400

    def test_statistics(self, api_client, contract, contract_service):
        contract_service.generate_payment_schedule(contract.id)

        response = api_client.get(f"{API}/payments/statistics/")
        assert response.status_code == 200
        body = response.json()
        assert body['total_payments'] == 4
        assert body['pending_payments'] == 4


# =============================================================================
# Maintenance / health
# =============================================================================

@pytest.mark.django_db
class TestMaintenanceAPI:

    def test_lifecycle(self, api_client, prop):
        created = api_client.post(f"{API}/maintenance/", {
            'property_id': prop.id, 'title': "Broken AC", 'description': "No cooling",
            'category': "HVAC", 'priority': 4,
        }, format='json')
        assert created.status_code == 201
        request_id = created.json()['id']

        urgent = api_client.get(f"{API}/maintenance/urgent/")
        assert urgent.status_code == 200

        assigned = api_client.post(f"{API}/maintenance/{request_id}/assign/",
                                   {'assigned_to': "CoolFix"}, format='json')
        assert assigned.json()['status'] == "InProgress"

        deleted = api_client.delete(f"{API}/maintenance/{request_id}/")
        assert deleted.status_code == 409

        completed = api_client.post(f"{API}/maintenance/{request_id}/complete/",
                                    {'actual_cost': "120.00"}, format='json')
        assert completed.json()['status'] == "Completed"

        reopened = api_client.post(f"{API}/maintenance/{request_id}/status/",
                                   {'status': "Submitted"}, format='json')
        assert reopened.status_code == 409


@pytest.mark.django_db
class TestHealth:

    def test_health(self, client):
        assert client.get("/health/").json()['status'] == "healthy"

    def test_ready(self, client):
        response = client.get("/health/ready/")
        assert response.status_code == 200
        checks = response.json()['checks']
        assert checks['database']['ok'] is True
        assert checks['migrations']['ok'] is True

    def test_failed_check_is_503(self, client, monkeypatch):
        from django.db import DatabaseError
        from common import health

        def unreachable():
            raise DatabaseError("connection refused")

        monkeypatch.setattr(health, 'READINESS_CHECKS', (('database', unreachable),))
        response = client.get("/health/ready/")
        assert response.status_code == 503
        body = response.json()
        assert body['status'] == "not_ready"
        assert body['checks']['database'] == {'ok': False, 'error': "connection refused"}

    def test_health_is_get_only(self, client):
        assert client.post("/health/").status_code == 405

    def test_request_id_header(self, client):
        assert len(client.get("/health/")['X-Request-ID']) == 8
