from django import forms
from core.constants import (
    ContractStatus, MaintenanceCategory, MaintenancePriority, MaintenanceStatus, PaymentMethod,
    PaymentStatus, PaymentType, PropertyStatus,
)
from contracts.models import Contract
from maintenance.models import MaintenanceRequest
from owners.models import Owner
from payments.models import Payment
from properties.models import Property
from tenants.models import Tenant


class OwnerForm(forms.ModelForm):
    """Form for adding owners"""
    class Meta:
        model = Owner
        fields = ['first_name', 'last_name', 'email', 'phone', 'address', 'national_id']
        widgets = {
            'first_name': forms.TextInput(attrs={'class': 'form-control'}),
            'last_name': forms.TextInput(attrs={'class': 'form-control'}),
            'email': forms.EmailInput(attrs={'class': 'form-control'}),
            'phone': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Phone Number'}),
            'address': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Full Address'}),
            'national_id': forms.TextInput(attrs={'class': 'form-control'}),
        }


class PropertyForm(forms.ModelForm):
    """Form for adding properties"""
    class Meta:
        model = Property
        fields = [
            'owner', 'title', 'description', 'property_type', 'address', 'city',
            'area', 'bedrooms', 'bathrooms', 'floor', 'has_parking', 'has_elevator',
            'has_balcony', 'monthly_rent', 'security_deposit',
        ]
        widgets = {
            'owner': forms.Select(attrs={'class': 'form-control'}),
            'title': forms.TextInput(attrs={'class': 'form-control'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'property_type': forms.Select(attrs={'class': 'form-control'}),
            'address': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Full Address'}),
            'city': forms.TextInput(attrs={'class': 'form-control'}),
            'area': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'bedrooms': forms.NumberInput(attrs={'class': 'form-control', 'min': 0}),
            'bathrooms': forms.NumberInput(attrs={'class': 'form-control', 'min': 0}),
            'floor': forms.NumberInput(attrs={'class': 'form-control'}),
            'monthly_rent': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'security_deposit': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
        }


class TenantForm(forms.ModelForm):
    """Form for adding tenants"""
    class Meta:
        model = Tenant
        fields = [
            'first_name', 'last_name', 'email', 'phone', 'alternate_phone', 'address',
            'national_id', 'occupation', 'company', 'monthly_income', 'emergency_contact',
            'date_of_birth',
        ]
        widgets = {
            'first_name': forms.TextInput(attrs={'class': 'form-control'}),
            'last_name': forms.TextInput(attrs={'class': 'form-control'}),
            'email': forms.EmailInput(attrs={'class': 'form-control'}),
            'phone': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Phone Number'}),
            'alternate_phone': forms.TextInput(attrs={'class': 'form-control'}),
            'address': forms.TextInput(attrs={'class': 'form-control'}),
            'national_id': forms.TextInput(attrs={'class': 'form-control'}),
            'occupation': forms.TextInput(attrs={'class': 'form-control'}),
            'company': forms.TextInput(attrs={'class': 'form-control'}),
            'monthly_income': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'emergency_contact': forms.TextInput(attrs={'class': 'form-control'}),
            'date_of_birth': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
        }


class ContractForm(forms.Form):
    """Form for creating a contract on an available property"""
    property = forms.ModelChoiceField(
        queryset=Property.objects.filter(status=PropertyStatus.AVAILABLE),
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    tenant = forms.ModelChoiceField(
        queryset=Tenant.objects.all(),
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    start_date = forms.DateField(widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}))
    end_date = forms.DateField(widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}))
    monthly_rent = forms.DecimalField(max_digits=18, decimal_places=2, min_value=0,
                                      widget=forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}))
    security_deposit = forms.DecimalField(max_digits=18, decimal_places=2, min_value=0, required=False,
                                          widget=forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}))
    terms = forms.CharField(required=False, widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}))
    notes = forms.CharField(required=False, widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 2}))

    def clean(self):
        cleaned_data = super().clean()
        start_date = cleaned_data.get('start_date')
        end_date = cleaned_data.get('end_date')
        if start_date and end_date and end_date < start_date:
            raise forms.ValidationError("End date cannot be before start date.")
        return cleaned_data


class TerminateContractForm(forms.Form):
    reason = forms.CharField(required=False, max_length=500,
                             widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Reason'}))


class MarkPaidForm(forms.Form):
    transaction_reference = forms.CharField(required=False, max_length=100,
                                            widget=forms.TextInput(attrs={'class': 'form-control'}))
    payment_method = forms.ChoiceField(required=False, choices=[('', '---------')] + PaymentMethod.CHOICES,
                                       widget=forms.Select(attrs={'class': 'form-control'}))


class MaintenanceRequestForm(forms.Form):
    """Form for raising a maintenance request"""
    property = forms.ModelChoiceField(
        queryset=Property.objects.all(),
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    tenant = forms.ModelChoiceField(
        queryset=Tenant.objects.all(), required=False,
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    title = forms.CharField(max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))
    description = forms.CharField(widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}))
    category = forms.ChoiceField(choices=MaintenanceCategory.CHOICES, initial=MaintenanceCategory.OTHER,
                                 widget=forms.Select(attrs={'class': 'form-control'}))
    priority = forms.TypedChoiceField(choices=MaintenancePriority.CHOICES, coerce=int,
                                      initial=MaintenancePriority.MEDIUM,
                                      widget=forms.Select(attrs={'class': 'form-control'}))
    estimated_cost = forms.DecimalField(max_digits=18, decimal_places=2, min_value=0, required=False,
                                        widget=forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}))


class AssignForm(forms.Form):
    assigned_to = forms.CharField(max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))
    assigned_to_phone = forms.CharField(max_length=20, required=False,
                                        widget=forms.TextInput(attrs={'class': 'form-control'}))
    scheduled_date = forms.DateTimeField(required=False,
                                         widget=forms.DateTimeInput(attrs={'class': 'form-control',
                                                                           'type': 'datetime-local'}))


class CompleteForm(forms.Form):
    actual_cost = forms.DecimalField(max_digits=18, decimal_places=2, min_value=0, required=False,
                                     widget=forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}))
    completion_notes = forms.CharField(required=False,
                                       widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 2}))


class StatusForm(forms.Form):
    status = forms.ChoiceField(choices=MaintenanceStatus.CHOICES,
                               widget=forms.Select(attrs={'class': 'form-control'}))


# Edit forms carry the version they were rendered from; a stale version is
# rejected by the service with a concurrency conflict.

class OwnerEditForm(OwnerForm):
    class Meta(OwnerForm.Meta):
        fields = OwnerForm.Meta.fields + ['version']
        widgets = {**OwnerForm.Meta.widgets, 'version': forms.HiddenInput()}


class PropertyEditForm(PropertyForm):
    """Status may only move between Available and Maintenance here"""
    class Meta(PropertyForm.Meta):
        fields = PropertyForm.Meta.fields + ['status', 'version']
        widgets = {
            **PropertyForm.Meta.widgets,
            'status': forms.Select(attrs={'class': 'form-control'}),
            'version': forms.HiddenInput(),
        }


class TenantEditForm(TenantForm):
    class Meta(TenantForm.Meta):
        fields = TenantForm.Meta.fields + ['version']
        widgets = {**TenantForm.Meta.widgets, 'version': forms.HiddenInput()}


class ContractEditForm(forms.ModelForm):
    """Editable terms of an existing contract"""
    class Meta:
        model = Contract
        fields = ['start_date', 'end_date', 'monthly_rent', 'security_deposit', 'terms', 'notes', 'version']
        widgets = {
            'start_date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'end_date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'monthly_rent': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'security_deposit': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'terms': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'notes': forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
            'version': forms.HiddenInput(),
        }


class PaymentForm(forms.Form):
    """Form for recording a payment by hand against a contract"""
    contract = forms.ModelChoiceField(
        queryset=Contract.objects.filter(status=ContractStatus.ACTIVE).select_related('property', 'tenant'),
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    amount = forms.DecimalField(max_digits=18, decimal_places=2, min_value=0,
                                widget=forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}))
    due_date = forms.DateField(widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}))
    payment_type = forms.ChoiceField(choices=PaymentType.CHOICES, initial=PaymentType.RENT,
                                     widget=forms.Select(attrs={'class': 'form-control'}))
    status = forms.ChoiceField(choices=[(PaymentStatus.PENDING, 'Pending'), (PaymentStatus.PAID, 'Paid')],
                               initial=PaymentStatus.PENDING,
                               widget=forms.Select(attrs={'class': 'form-control'}))
    payment_method = forms.ChoiceField(required=False, choices=[('', '---------')] + PaymentMethod.CHOICES,
                                       widget=forms.Select(attrs={'class': 'form-control'}))
    transaction_reference = forms.CharField(required=False, max_length=100,
                                            widget=forms.TextInput(attrs={'class': 'form-control'}))
    notes = forms.CharField(required=False, max_length=500,
                            widget=forms.TextInput(attrs={'class': 'form-control'}))


class PaymentEditForm(forms.ModelForm):
    """Amount and due date are locked once a payment is paid"""
    class Meta:
        model = Payment
        fields = ['amount', 'due_date', 'payment_type', 'payment_method', 'transaction_reference', 'notes',
                  'version']
        widgets = {
            'amount': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'due_date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'payment_type': forms.Select(attrs={'class': 'form-control'}),
            'payment_method': forms.Select(attrs={'class': 'form-control'}),
            'transaction_reference': forms.TextInput(attrs={'class': 'form-control'}),
            'notes': forms.TextInput(attrs={'class': 'form-control'}),
            'version': forms.HiddenInput(),
        }


class MaintenanceEditForm(forms.ModelForm):
    """Descriptive fields of a request; status moves through the lifecycle actions"""
    class Meta:
        model = MaintenanceRequest
        fields = ['title', 'description', 'category', 'priority', 'estimated_cost', 'scheduled_date',
                  'internal_notes', 'version']
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'category': forms.Select(attrs={'class': 'form-control'}),
            'priority': forms.Select(attrs={'class': 'form-control'}),
            'estimated_cost': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'scheduled_date': forms.DateTimeInput(attrs={'class': 'form-control', 'type': 'datetime-local'},
                                                  format='%Y-%m-%dT%H:%M'),
            'internal_notes': forms.Textarea(attrs={'class': 'form-control', 'rows': 2}),
            'version': forms.HiddenInput(),
        }
