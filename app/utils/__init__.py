from .validators import (
    validate_required_fields, validate_date_format, validate_enum, validate_integer,
    validate_percent, validate_amount, validate_team, validate_week, validate_field,
    validate_email_format
)

__all__ = [
    'validate_required_fields', 'validate_date_format', 'validate_enum', 'validate_integer',
    'validate_percent', 'validate_amount', 'validate_team', 'validate_week', 'validate_field',
    'validate_email_format'
]
