"""
Server-rendered UI.
Every POST redirects on completion; outcomes are reported with Django messages.
"""
from django.shortcuts import render, redirect, get_object_or_404
from django.urls import reverse
from django.core.paginator import Paginator, EmptyPage, PageNotAnInteger
from django.db.models import Count, Q
from django.contrib import messages
from django.views.decorators.http import require_POST

from core.constants import (
    ContractStatus, MaintenancePriority, MaintenanceStatus, PaymentStatus, PropertyStatus,
)
from core.dto import ContractDTO, MaintenanceRequestDTO, PaymentDTO
from core.exceptions import ConflictError, ValidationError
from common.decorators import handle_application_errors
from api.filters import month_param
from owners.services import OwnerService
from properties.services import PropertyService
from tenants.services import TenantService
from contracts.models import Contract
from contracts.services import ContractService
from payments.services import PaymentLedgerService
from maintenance.models import MaintenanceRequest
from maintenance.services import MaintenanceService
from .forms import (
    OwnerForm, PropertyForm, TenantForm, ContractForm, TerminateContractForm,
    MarkPaidForm, MaintenanceRequestForm, AssignForm, CompleteForm, StatusForm,
    OwnerEditForm, PropertyEditForm, TenantEditForm, ContractEditForm, PaymentForm,
    PaymentEditForm, MaintenanceEditForm,
)

PAGE_SIZE = 20


def _paginate(request, queryset, per_page=PAGE_SIZE):
    paginator = Paginator(queryset, per_page)
    page = request.GET.get('page', 1)
    try:
        return paginator.page(page)
    except PageNotAnInteger:
        return paginator.page(1)
    except EmptyPage:
        return paginator.page(paginator.num_pages)


def _form_errors(form):
    return '; '.join(
        f"{field}: {' '.join(errors)}" if field != '__all__' else ' '.join(errors)
        for field, errors in form.errors.items()
    )


def _create_view(request, form_class, create, success_url, title, template='web/form.html'):
    """
    GET renders an empty form; POST validates it, hands the cleaned data to
    ``create`` and redirects. Service validation errors are shown on the form.
    """
    if request.method == 'POST':
        form = form_class(request.POST)
        if form.is_valid():
            try:
                instance = create(form.cleaned_data)
            except ValidationError as e:
                form.add_error(None, e.message)
            else:
                messages.success(request, f'{instance} created successfully.')
                return redirect(success_url(instance) if callable(success_url) else success_url)
    else:
        form = form_class()

    return render(request, template, {'form': form, 'title': title})


def _edit_view(request, form_class, instance, update, success_url, title, template='web/form.html'):
    """
    GET renders the form bound to ``instance``; POST hands the cleaned data and
    the posted version to ``update``. Rule and version conflicts are shown on
    the form.
    """
    if request.method == 'POST':
        form = form_class(request.POST, instance=instance)
        if form.is_valid():
            data = dict(form.cleaned_data)
            version = data.pop('version', None)
            try:
                updated = update(instance.id, data, expected_version=version)
            except (ValidationError, ConflictError) as e:
                form.add_error(None, e.message)
            else:
                messages.success(request, f'{updated} updated successfully.')
                return redirect(success_url(updated) if callable(success_url) else success_url)
    else:
        form = form_class(instance=instance)

    return render(request, template, {'form': form, 'title': title})


def dashboard(request):
    """Dashboard with ledger statistics, property counts and urgent maintenance"""
    stats = PaymentLedgerService().compute_statistics()

    property_counts = PropertyService().property_repo.get_all().aggregate(
        total=Count('id'),
        available=Count('id', filter=Q(status=PropertyStatus.AVAILABLE)),
        rented=Count('id', filter=Q(status=PropertyStatus.RENTED)),
        maintenance=Count('id', filter=Q(status=PropertyStatus.MAINTENANCE)),
    )

    context = {
        'stats': stats,
        'property_counts': property_counts,
        'active_contracts': Contract.objects.filter(status=ContractStatus.ACTIVE).count(),
        'urgent_requests': MaintenanceService().list_urgent()[:5],
        'recent_contracts': Contract.objects.select_related('property', 'tenant').order_by('-created_at')[:5],
    }
    return render(request, 'web/dashboard.html', context)


# Owners

def owner_list(request):
    search = request.GET.get('search', '')
    owners = OwnerService().owner_repo.search(search).order_by('last_name', 'first_name', 'id')
    return render(request, 'web/owner_list.html', {'owners': _paginate(request, owners), 'search': search})


def owner_detail(request, owner_id):
    service = OwnerService()
    owner = get_object_or_404(service.owner_repo.get_queryset(), id=owner_id)
    context = {
        'owner': owner,
        'properties': _paginate(request, service.get_properties(owner.id)),
    }
    return render(request, 'web/owner_detail.html', context)


def owner_create(request):
    return _create_view(request, OwnerForm, OwnerService().create_owner,
                        lambda owner: reverse('web:owner_detail', args=[owner.id]), 'Add Owner')


@handle_application_errors(fallback='web:owner_list')
def owner_edit(request, owner_id):
    service = OwnerService()
    owner = get_object_or_404(service.owner_repo.get_queryset(), id=owner_id)
    return _edit_view(request, OwnerEditForm, owner, service.update_owner,
                      lambda owner: reverse('web:owner_detail', args=[owner.id]), f'Edit {owner.full_name}')


@require_POST
@handle_application_errors(fallback='web:owner_list')
def owner_delete(request, owner_id):
    OwnerService().delete_owner(owner_id)
    messages.success(request, 'Owner deleted successfully.')
    return redirect('web:owner_list')


# Properties

def property_list(request):
    status_filter = request.GET.get('status', '')
    search = request.GET.get('search', '')
    properties = PropertyService().property_repo.filter_listing(
        status=status_filter or None, search=search or None
    ).order_by('-created_at', '-id')

    context = {
        'properties': _paginate(request, properties),
        'status_filter': status_filter,
        'search': search,
        'status_choices': PropertyStatus.CHOICES,
    }
    return render(request, 'web/property_list.html', context)


def property_detail(request, property_id):
    prop = get_object_or_404(PropertyService().property_repo.get_queryset(), id=property_id)
    context = {
        'property': prop,
        'contracts': prop.contracts.select_related('tenant').order_by('-start_date', '-id'),
        'maintenance_requests': prop.maintenance_requests.order_by('-request_date', '-id')[:10],
        'images': prop.images.order_by('display_order', 'id'),
    }
    return render(request, 'web/property_detail.html', context)


def property_create(request):
    return _create_view(request, PropertyForm, PropertyService().create_property,
                        lambda prop: reverse('web:property_detail', args=[prop.id]), 'Add Property')


@handle_application_errors(fallback='web:property_list')
def property_edit(request, property_id):
    service = PropertyService()
    prop = get_object_or_404(service.property_repo.get_queryset(), id=property_id)
    return _edit_view(request, PropertyEditForm, prop, service.update_property,
                      lambda prop: reverse('web:property_detail', args=[prop.id]), f'Edit {prop.title}')


@require_POST
@handle_application_errors(fallback='web:property_list')
def property_delete(request, property_id):
    PropertyService().delete_property(property_id)
    messages.success(request, 'Property deleted successfully.')
    return redirect('web:property_list')


# Tenants

def tenant_list(request):
    search = request.GET.get('search', '')
    tenants = TenantService().tenant_repo.search(search).order_by('last_name', 'first_name', 'id')
    return render(request, 'web/tenant_list.html', {'tenants': _paginate(request, tenants), 'search': search})


def tenant_detail(request, tenant_id):
    service = TenantService()
    tenant = get_object_or_404(service.tenant_repo.get_queryset(), id=tenant_id)
    context = {
        'tenant': tenant,
        'contracts': service.get_contracts(tenant.id),
        'payments': _paginate(request, service.get_payments(tenant.id)),
    }
    return render(request, 'web/tenant_detail.html', context)


def tenant_create(request):
    return _create_view(request, TenantForm, TenantService().create_tenant,
                        lambda tenant: reverse('web:tenant_detail', args=[tenant.id]), 'Add Tenant')


@handle_application_errors(fallback='web:tenant_list')
def tenant_edit(request, tenant_id):
    service = TenantService()
    tenant = get_object_or_404(service.tenant_repo.get_queryset(), id=tenant_id)
    return _edit_view(request, TenantEditForm, tenant, service.update_tenant,
                      lambda tenant: reverse('web:tenant_detail', args=[tenant.id]), f'Edit {tenant.full_name}')


@require_POST
@handle_application_errors(fallback='web:tenant_list')
def tenant_delete(request, tenant_id):
    TenantService().delete_tenant(tenant_id)
    messages.success(request, 'Tenant deleted successfully.')
    return redirect('web:tenant_list')


# Contracts

def contract_list(request):
    search = request.GET.get('search', '')
    active = request.GET.get('active', '')
    contracts = ContractService().contract_repo.filter_listing(
        active={'true': True, 'false': False}.get(active),
        search=search or None,
    ).order_by('-created_at', '-id')

    context = {
        'contracts': _paginate(request, contracts),
        'search': search,
        'active': active,
    }
    return render(request, 'web/contract_list.html', context)


def contract_detail(request, contract_id):
    contract = get_object_or_404(
        Contract.objects.select_related('property', 'tenant'), id=contract_id
    )
    context = {
        'contract': contract,
        'payments': contract.payments.order_by('due_date', 'id'),
        'terminate_form': TerminateContractForm(),
    }
    return render(request, 'web/contract_detail.html', context)


@handle_application_errors(fallback='web:contract_list')
def contract_create(request):
    def create(data):
        return ContractService().create_contract(ContractDTO(
            property_id=data['property'].id,
            tenant_id=data['tenant'].id,
            start_date=data['start_date'],
            end_date=data['end_date'],
            monthly_rent=data['monthly_rent'],
            security_deposit=data['security_deposit'] or 0,
            terms=data['terms'],
            notes=data['notes'],
        ))

    return _create_view(
        request, ContractForm, create,
        lambda contract: reverse('web:contract_detail', args=[contract.id]),
        'New Contract'
    )


@handle_application_errors(fallback='web:contract_list')
def contract_edit(request, contract_id):
    service = ContractService()
    contract = get_object_or_404(service.contract_repo.get_queryset(), id=contract_id)
    return _edit_view(request, ContractEditForm, contract, service.update_contract,
                      lambda contract: reverse('web:contract_detail', args=[contract.id]),
                      f'Edit {contract.contract_number}')


@require_POST
@handle_application_errors(fallback='web:contract_list')
def contract_terminate(request, contract_id):
    form = TerminateContractForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_errors(form))
        return redirect('web:contract_detail', contract_id=contract_id)

    contract = ContractService().terminate_contract(contract_id, form.cleaned_data['reason'])
    messages.success(request, f'Contract {contract.contract_number} terminated.')
    return redirect('web:contract_detail', contract_id=contract_id)


@require_POST
@handle_application_errors(fallback='web:contract_list')
def contract_generate_payments(request, contract_id):
    payments = ContractService().generate_payment_schedule(contract_id)
    messages.success(request, f'{len(payments)} payments generated.')
    return redirect('web:contract_detail', contract_id=contract_id)


# Payments

def payment_list(request):
    status_filter = request.GET.get('status', '')
    search = request.GET.get('search', '')
    month_filter = request.GET.get('month', '')
    try:
        month = month_param(request.GET, 'month')
    except ValidationError as e:
        messages.error(request, e.message)
        month, month_filter = None, ''

    service = PaymentLedgerService()
    payments = service.payment_repo.filter_listing(
        status=status_filter or None, search=search or None, month=month
    ).order_by('due_date', 'id')

    context = {
        'payments': _paginate(request, payments),
        'stats': service.compute_statistics(),
        'status_filter': status_filter,
        'month_filter': month_filter,
        'search': search,
        'status_choices': PaymentStatus.CHOICES,
        'mark_paid_form': MarkPaidForm(),
    }
    return render(request, 'web/payment_list.html', context)


def payment_detail(request, payment_id):
    payment = get_object_or_404(PaymentLedgerService().payment_repo.get_queryset(), id=payment_id)
    return render(request, 'web/payment_detail.html', {'payment': payment, 'mark_paid_form': MarkPaidForm()})


@handle_application_errors(fallback='web:payment_list')
def payment_create(request):
    def create(data):
        return PaymentLedgerService().record_payment(PaymentDTO(
            contract_id=data['contract'].id,
            amount=data['amount'],
            due_date=data['due_date'],
            payment_type=data['payment_type'],
            status=data['status'],
            payment_method=data['payment_method'] or None,
            transaction_reference=data['transaction_reference'],
            notes=data['notes'],
        ))

    return _create_view(
        request, PaymentForm, create,
        lambda payment: reverse('web:payment_detail', args=[payment.id]),
        'Record Payment'
    )


@handle_application_errors(fallback='web:payment_list')
def payment_edit(request, payment_id):
    service = PaymentLedgerService()
    payment = get_object_or_404(service.payment_repo.get_queryset(), id=payment_id)
    return _edit_view(request, PaymentEditForm, payment, service.update_payment,
                      lambda payment: reverse('web:payment_detail', args=[payment.id]),
                      f'Edit {payment.receipt_number}')


@require_POST
@handle_application_errors(fallback='web:payment_list')
def payment_mark_paid(request, payment_id):
    form = MarkPaidForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_errors(form))
        return redirect('web:payment_list')

    payment = PaymentLedgerService().mark_paid(
        payment_id,
        transaction_reference=form.cleaned_data['transaction_reference'],
        payment_method=form.cleaned_data['payment_method'] or None,
    )
    messages.success(request, f'Payment {payment.receipt_number} marked as paid.')
    return redirect('web:payment_list')


@require_POST
@handle_application_errors(fallback='web:payment_list')
def payment_mark_overdue(request, payment_id):
    payment = PaymentLedgerService().mark_overdue(payment_id)
    messages.success(request, f'Payment {payment.receipt_number} marked as overdue.')
    return redirect('web:payment_list')


@require_POST
@handle_application_errors(fallback='web:payment_list')
def payment_delete(request, payment_id):
    PaymentLedgerService().delete_payment(payment_id)
    messages.success(request, 'Payment deleted successfully.')
    return redirect('web:payment_list')


# Maintenance

def maintenance_list(request):
    status_filter = request.GET.get('status', '')
    priority_filter = request.GET.get('priority', '')
    requests = MaintenanceService().request_repo.filter_listing(
        status=status_filter or None,
        priority=int(priority_filter) if priority_filter.isdigit() else None,
    ).order_by('-request_date', '-id')

    context = {
        'requests': _paginate(request, requests),
        'status_filter': status_filter,
        'priority_filter': priority_filter,
        'status_choices': MaintenanceStatus.CHOICES,
        'priority_choices': MaintenancePriority.CHOICES,
    }
    return render(request, 'web/maintenance_list.html', context)


def maintenance_detail(request, request_id):
    maintenance_request = get_object_or_404(
        MaintenanceRequest.objects.select_related('property', 'tenant'), id=request_id
    )
    context = {
        'maintenance_request': maintenance_request,
        'assign_form': AssignForm(),
        'complete_form': CompleteForm(),
        'status_form': StatusForm(initial={'status': maintenance_request.status}),
    }
    return render(request, 'web/maintenance_detail.html', context)


@handle_application_errors(fallback='web:maintenance_list')
def maintenance_create(request):
    def create(data):
        return MaintenanceService().create_request(MaintenanceRequestDTO(
            property_id=data['property'].id,
            tenant_id=data['tenant'].id if data['tenant'] else None,
            title=data['title'],
            description=data['description'],
            category=data['category'],
            priority=data['priority'],
            estimated_cost=data['estimated_cost'],
        ))

    return _create_view(
        request, MaintenanceRequestForm, create,
        lambda instance: reverse('web:maintenance_detail', args=[instance.id]),
        'New Maintenance Request'
    )


@handle_application_errors(fallback='web:maintenance_list')
def maintenance_edit(request, request_id):
    service = MaintenanceService()
    maintenance_request = get_object_or_404(service.request_repo.get_queryset(), id=request_id)
    return _edit_view(request, MaintenanceEditForm, maintenance_request, service.update_request,
                      lambda instance: reverse('web:maintenance_detail', args=[instance.id]),
                      f'Edit {maintenance_request.request_number}')


def _maintenance_action(request, request_id, form_class, perform, success_message):
    form = form_class(request.POST)
    if not form.is_valid():
        messages.error(request, _form_errors(form))
        return redirect('web:maintenance_detail', request_id=request_id)

    instance = perform(request_id, **form.cleaned_data)
    messages.success(request, success_message.format(number=instance.request_number))
    return redirect('web:maintenance_detail', request_id=request_id)


@require_POST
@handle_application_errors(fallback='web:maintenance_list')
def maintenance_assign(request, request_id):
    return _maintenance_action(request, request_id, AssignForm, MaintenanceService().assign,
                               'Request {number} assigned.')


@require_POST
@handle_application_errors(fallback='web:maintenance_list')
def maintenance_complete(request, request_id):
    return _maintenance_action(request, request_id, CompleteForm, MaintenanceService().complete,
                               'Request {number} completed.')


@require_POST
@handle_application_errors(fallback='web:maintenance_list')
def maintenance_status(request, request_id):
    def perform(pk, status):
        return MaintenanceService().update_status(pk, status)

    return _maintenance_action(request, request_id, StatusForm, perform,
                               'Request {number} status updated.')


@require_POST
@handle_application_errors(fallback='web:maintenance_list')
def maintenance_delete(request, request_id):
    MaintenanceService().delete_request(request_id)
    messages.success(request, 'Maintenance request deleted successfully.')
    return redirect('web:maintenance_list')
