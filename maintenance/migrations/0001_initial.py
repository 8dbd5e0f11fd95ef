import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('properties', '0001_initial'),
        ('tenants', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MaintenanceRequest',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('request_number', models.CharField(editable=False, max_length=50, unique=True)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('category', models.CharField(choices=[('Plumbing', 'Plumbing'), ('Electrical', 'Electrical'), ('HVAC', 'HVAC'), ('Painting', 'Painting'), ('Flooring', 'Flooring'), ('Appliances', 'Appliances'), ('Security', 'Security'), ('Cleaning', 'Cleaning'), ('Landscaping', 'Landscaping'), ('Structural', 'Structural'), ('Other', 'Other')], default='Other', max_length=20)),
                ('priority', models.PositiveSmallIntegerField(choices=[(1, 'Low'), (2, 'Medium'), (3, 'High'), (4, 'Emergency')], default=2)),
                ('status', models.CharField(choices=[('Submitted', 'Submitted'), ('InProgress', 'In Progress'), ('Completed', 'Completed'), ('Cancelled', 'Cancelled'), ('OnHold', 'On Hold')], default='Submitted', max_length=20)),
                ('estimated_cost', models.DecimalField(blank=True, decimal_places=2, max_digits=18, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('actual_cost', models.DecimalField(blank=True, decimal_places=2, max_digits=18, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('currency', models.CharField(default='EGP', max_length=3)),
                ('request_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('scheduled_date', models.DateTimeField(blank=True, null=True)),
                ('completed_date', models.DateTimeField(blank=True, null=True)),
                ('assigned_to', models.CharField(blank=True, help_text="e.g., 'Plumber', 'Electrician', contractor name", max_length=200)),
                ('assigned_to_phone', models.CharField(blank=True, max_length=20)),
                ('completion_notes', models.TextField(blank=True)),
                ('internal_notes', models.TextField(blank=True)),
                ('version', models.PositiveIntegerField(default=1)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('property', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='maintenance_requests', to='properties.property')),
                ('tenant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='maintenance_requests', to='tenants.tenant')),
            ],
            options={
                'verbose_name': 'Maintenance Request',
                'verbose_name_plural': 'Maintenance Requests',
                'ordering': ['-request_date'],
                'indexes': [
                    models.Index(fields=['status', 'priority'], name='maint_status_priority_idx'),
                    models.Index(fields=['property', 'status'], name='maint_property_status_idx'),
                    models.Index(fields=['request_date'], name='maint_request_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='MaintenanceImage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('file_name', models.CharField(max_length=255)),
                ('file_path', models.CharField(max_length=500)),
                ('content_type', models.CharField(blank=True, max_length=100)),
                ('file_size', models.PositiveIntegerField(default=0, help_text='File size in bytes')),
                ('image_type', models.CharField(choices=[('Before', 'Before'), ('During', 'During'), ('After', 'After'), ('Invoice', 'Invoice'), ('Other', 'Other')], default='Other', max_length=20)),
                ('caption', models.CharField(blank=True, max_length=255)),
                ('uploaded_at', models.DateTimeField(auto_now_add=True)),
                ('maintenance_request', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='images', to='maintenance.maintenancerequest')),
            ],
            options={
                'verbose_name': 'Maintenance Image',
                'verbose_name_plural': 'Maintenance Images',
                'ordering': ['uploaded_at', 'id'],
            },
        ),
    ]
