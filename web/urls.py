from django.urls import path
from . import views

app_name = 'web'

urlpatterns = [
    path('', views.dashboard, name='dashboard'),

    path('owners/', views.owner_list, name='owner_list'),
    path('owners/add/', views.owner_create, name='owner_create'),
    path('owners/<int:owner_id>/', views.owner_detail, name='owner_detail'),
    path('owners/<int:owner_id>/edit/', views.owner_edit, name='owner_edit'),
    path('owners/<int:owner_id>/delete/', views.owner_delete, name='owner_delete'),

    path('properties/', views.property_list, name='property_list'),
    path('properties/add/', views.property_create, name='property_create'),
    path('properties/<int:property_id>/', views.property_detail, name='property_detail'),
    path('properties/<int:property_id>/edit/', views.property_edit, name='property_edit'),
    path('properties/<int:property_id>/delete/', views.property_delete, name='property_delete'),

    path('tenants/', views.tenant_list, name='tenant_list'),
    path('tenants/add/', views.tenant_create, name='tenant_create'),
    path('tenants/<int:tenant_id>/', views.tenant_detail, name='tenant_detail'),
    path('tenants/<int:tenant_id>/edit/', views.tenant_edit, name='tenant_edit'),
    path('tenants/<int:tenant_id>/delete/', views.tenant_delete, name='tenant_delete'),

    path('contracts/', views.contract_list, name='contract_list'),
    path('contracts/add/', views.contract_create, name='contract_create'),
    path('contracts/<int:contract_id>/', views.contract_detail, name='contract_detail'),
    path('contracts/<int:contract_id>/edit/', views.contract_edit, name='contract_edit'),
    path('contracts/<int:contract_id>/terminate/', views.contract_terminate, name='contract_terminate'),
    path('contracts/<int:contract_id>/generate-payments/', views.contract_generate_payments,
         name='contract_generate_payments'),

    path('payments/', views.payment_list, name='payment_list'),
    path('payments/add/', views.payment_create, name='payment_create'),
    path('payments/<int:payment_id>/', views.payment_detail, name='payment_detail'),
    path('payments/<int:payment_id>/edit/', views.payment_edit, name='payment_edit'),
    path('payments/<int:payment_id>/mark-paid/', views.payment_mark_paid, name='payment_mark_paid'),
    path('payments/<int:payment_id>/mark-overdue/', views.payment_mark_overdue, name='payment_mark_overdue'),
    path('payments/<int:payment_id>/delete/', views.payment_delete, name='payment_delete'),

    path('maintenance/', views.maintenance_list, name='maintenance_list'),
    path('maintenance/add/', views.maintenance_create, name='maintenance_create'),
    path('maintenance/<int:request_id>/', views.maintenance_detail, name='maintenance_detail'),
    path('maintenance/<int:request_id>/edit/', views.maintenance_edit, name='maintenance_edit'),
    path('maintenance/<int:request_id>/assign/', views.maintenance_assign, name='maintenance_assign'),
    path('maintenance/<int:request_id>/complete/', views.maintenance_complete, name='maintenance_complete'),
    path('maintenance/<int:request_id>/status/', views.maintenance_status, name='maintenance_status'),
    path('maintenance/<int:request_id>/delete/', views.maintenance_delete, name='maintenance_delete'),
]
