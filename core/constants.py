"""
Application-wide constants.
Status vocabularies and their transition tables live here so every app
validates against the same closed sets.
"""


# Property Status
class PropertyStatus:
    AVAILABLE = 'Available'
    RENTED = 'Rented'
    MAINTENANCE = 'Maintenance'

    CHOICES = [
        (AVAILABLE, 'Available'),
        (RENTED, 'Rented'),
        (MAINTENANCE, 'Maintenance'),
    ]


# Property Types
class PropertyType:
    APARTMENT = 'Apartment'
    VILLA = 'Villa'
    HOUSE = 'House'
    STUDIO = 'Studio'
    OFFICE = 'Office'
    SHOP = 'Shop'
    OTHER = 'Other'

    CHOICES = [
        (APARTMENT, 'Apartment'),
        (VILLA, 'Villa'),
        (HOUSE, 'House'),
        (STUDIO, 'Studio'),
        (OFFICE, 'Office'),
        (SHOP, 'Shop'),
        (OTHER, 'Other'),
    ]


# Contract Status
class ContractStatus:
    ACTIVE = 'Active'
    TERMINATED = 'Terminated'

    CHOICES = [
        (ACTIVE, 'Active'),
        (TERMINATED, 'Terminated'),
    ]


# Payment Status
class PaymentStatus:
    PENDING = 'Pending'
    PAID = 'Paid'
    OVERDUE = 'Overdue'

    CHOICES = [
        (PENDING, 'Pending'),
        (PAID, 'Paid'),
        (OVERDUE, 'Overdue'),
    ]

    # Paid is terminal: revenue figures never go backwards
    TRANSITIONS = {
        PENDING: {PAID, OVERDUE},
        OVERDUE: {PAID},
        PAID: set(),
    }

    OUTSTANDING = [PENDING, OVERDUE]


class PaymentType:
    RENT = 'Rent'
    DEPOSIT = 'Deposit'
    MAINTENANCE = 'Maintenance'
    UTILITY = 'Utility'
    OTHER = 'Other'

    CHOICES = [
        (RENT, 'Rent'),
        (DEPOSIT, 'Deposit'),
        (MAINTENANCE, 'Maintenance'),
        (UTILITY, 'Utility'),
        (OTHER, 'Other'),
    ]


class PaymentMethod:
    CASH = 'Cash'
    BANK_TRANSFER = 'BankTransfer'
    CHECK = 'Check'
    CARD = 'Card'
    ONLINE = 'Online'

    CHOICES = [
        (CASH, 'Cash'),
        (BANK_TRANSFER, 'Bank Transfer'),
        (CHECK, 'Check'),
        (CARD, 'Card'),
        (ONLINE, 'Online'),
    ]


# Maintenance
class MaintenanceStatus:
    SUBMITTED = 'Submitted'
    IN_PROGRESS = 'InProgress'
    COMPLETED = 'Completed'
    CANCELLED = 'Cancelled'
    ON_HOLD = 'OnHold'

    CHOICES = [
        (SUBMITTED, 'Submitted'),
        (IN_PROGRESS, 'In Progress'),
        (COMPLETED, 'Completed'),
        (CANCELLED, 'Cancelled'),
        (ON_HOLD, 'On Hold'),
    ]

    TRANSITIONS = {
        SUBMITTED: {IN_PROGRESS, COMPLETED, CANCELLED, ON_HOLD},
        IN_PROGRESS: {IN_PROGRESS, COMPLETED, CANCELLED, ON_HOLD},
        ON_HOLD: {SUBMITTED, IN_PROGRESS, CANCELLED},
        COMPLETED: set(),
        CANCELLED: set(),
    }

    CLOSED = [COMPLETED, CANCELLED]
    DELETABLE = [SUBMITTED, CANCELLED]


class MaintenancePriority:
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    EMERGENCY = 4

    CHOICES = [
        (LOW, 'Low'),
        (MEDIUM, 'Medium'),
        (HIGH, 'High'),
        (EMERGENCY, 'Emergency'),
    ]

    URGENT = [HIGH, EMERGENCY]


class MaintenanceCategory:
    PLUMBING = 'Plumbing'
    ELECTRICAL = 'Electrical'
    HVAC = 'HVAC'
    PAINTING = 'Painting'
    FLOORING = 'Flooring'
    APPLIANCES = 'Appliances'
    SECURITY = 'Security'
    CLEANING = 'Cleaning'
    LANDSCAPING = 'Landscaping'
    STRUCTURAL = 'Structural'
    OTHER = 'Other'

    CHOICES = [
        (PLUMBING, 'Plumbing'),
        (ELECTRICAL, 'Electrical'),
        (HVAC, 'HVAC'),
        (PAINTING, 'Painting'),
        (FLOORING, 'Flooring'),
        (APPLIANCES, 'Appliances'),
        (SECURITY, 'Security'),
        (CLEANING, 'Cleaning'),
        (LANDSCAPING, 'Landscaping'),
        (STRUCTURAL, 'Structural'),
        (OTHER, 'Other'),
    ]


class ImageType:
    BEFORE = 'Before'
    DURING = 'During'
    AFTER = 'After'
    INVOICE = 'Invoice'
    OTHER = 'Other'

    CHOICES = [
        (BEFORE, 'Before'),
        (DURING, 'During'),
        (AFTER, 'After'),
        (INVOICE, 'Invoice'),
        (OTHER, 'Other'),
    ]


# Identifier prefixes
class NumberPrefix:
    CONTRACT = 'CON'
    RECEIPT = 'REC'
    MAINTENANCE = 'MR'


# Pagination
class Pagination:
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100
