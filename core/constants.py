"""Fixed values shared by the models, validation and billing."""

# Billing
TAX_RATE = 0.10
DEFAULT_PAYMENT_STATUS = "PENDING"
PAID_STATUS = "PAID"

# Stored text formats
DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"

# Validation bounds
MIN_AGE = 0
MAX_AGE = 150
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100

# Scheduling grid for slot suggestions
CLINIC_OPEN_HOUR = 9
CLINIC_CLOSE_HOUR = 17
MAX_SUGGESTED_SLOTS = 5

WELCOME_MSG = "Welcome to the Clinic Console"
EXIT_MSG = "Goodbye!"
