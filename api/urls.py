"""
API URLs for Rental Manager
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from owners.views import OwnerViewSet
from properties.views import PropertyViewSet
from tenants.views import TenantViewSet
from contracts.views import ContractViewSet
from payments.views import PaymentViewSet
from maintenance.views import MaintenanceRequestViewSet

# Create router
router = DefaultRouter()
router.register(r'owners', OwnerViewSet, basename='owner')
router.register(r'properties', PropertyViewSet, basename='property')
router.register(r'tenants', TenantViewSet, basename='tenant')
router.register(r'contracts', ContractViewSet, basename='contract')
router.register(r'payments', PaymentViewSet, basename='payment')
router.register(r'maintenance', MaintenanceRequestViewSet, basename='maintenance')

urlpatterns = [
    path('', include(router.urls)),
]
