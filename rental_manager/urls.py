"""
URL configuration for rental_manager project.
"""
from django.contrib import admin
from django.urls import path, include

from rental_manager import admin as admin_customization  # noqa: F401

# Import health check URLs
from common.health import get_health_urls

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('api.urls')),  # API routes
    path('', include('web.urls')),  # Server-rendered UI
]

# Add health check endpoints (for load balancers, monitoring)
urlpatterns += get_health_urls()
