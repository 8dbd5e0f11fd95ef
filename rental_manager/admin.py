from django.contrib import admin

# Customize admin site
admin.site.site_header = "Rental Manager - Admin Panel"
admin.site.site_title = "Rental Manager Admin"
admin.site.index_title = "Property, tenant and contract records"
