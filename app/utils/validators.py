import math
import re
from datetime import datetime
from enum import Enum

from app.models import UTILIZATION_WEEKS
from app.models.fields import TEXT, DATE, INTEGER, PERCENT, AMOUNT, TEAM

INTEGER_MIN = -2 ** 63
INTEGER_MAX = 2 ** 63 - 1

def validate_required_fields(data, required_fields):
    """Validate that required fields are present in data"""
    if not data:
        return False, "No data provided"

    for field in required_fields:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            return False, f"{field} is required"

    return True, ""

def validate_date_format(date_string):
    """Validate date string is in YYYY-MM-DD format"""
    if not isinstance(date_string, str):
        return False, "Invalid date format. Use YYYY-MM-DD"
    try:
        parsed_date = datetime.strptime(date_string, '%Y-%m-%d').date()
        return True, parsed_date
    except ValueError:
        return False, "Invalid date format. Use YYYY-MM-DD"

def validate_enum(enum_cls, value):
    """Validate a raw value against an enum, returning the member"""
    try:
        return True, enum_cls(value)
    except ValueError:
        allowed = ', '.join(m.value for m in enum_cls)
        return False, f"Invalid value '{value}'. Must be one of: {allowed}"

def validate_integer(value):
    """Validate an integer, accepting integral floats and numeric strings"""
    if isinstance(value, bool):
        return False, "must be an integer"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return False, "must be an integer"
    if not isinstance(value, int):
        return False, "must be an integer"
    # Stored as a signed 64-bit INTEGER
    if value < INTEGER_MIN or value > INTEGER_MAX:
        return False, "is out of range"
    return True, value

def validate_percent(value):
    """Validate an integer percentage between 0 and 100"""
    is_valid, result = validate_integer(value)
    if not is_valid:
        return False, result
    if result < 0 or result > 100:
        return False, "must be between 0 and 100"
    return True, result

def validate_amount(value):
    """Validate a non-negative currency amount"""
    if isinstance(value, bool):
        return False, "must be a number"
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return False, "must be a number"
    if not isinstance(value, (int, float)):
        return False, "must be a number"
    try:
        value = float(value)
    except OverflowError:
        return False, "must be a finite number"
    if not math.isfinite(value):
        return False, "must be a finite number"
    if value < 0:
        return False, "must not be negative"
    return True, value

def validate_team(value):
    """Core team is stored as free text; lists of member ids are joined"""
    if isinstance(value, (list, tuple)):
        return True, ', '.join(str(item) for item in value)
    return True, str(value)

def validate_week(week):
    """Validate a utilization week label"""
    if week not in UTILIZATION_WEEKS:
        return False, f"Invalid week '{week}'. Must be one of: {', '.join(UTILIZATION_WEEKS)}"
    return True, week

def validate_field(spec, value):
    """Validate and coerce one raw input value according to its field spec"""
    if value is None:
        return True, None
    if spec.kind == TEXT:
        return True, str(value)
    if isinstance(value, str) and not value.strip():
        return True, None

    if isinstance(spec.kind, type) and issubclass(spec.kind, Enum):
        is_valid, result = validate_enum(spec.kind, value)
    elif spec.kind == DATE:
        is_valid, result = validate_date_format(value)
        if is_valid:
            result = result.isoformat()
    elif spec.kind == INTEGER:
        is_valid, result = validate_integer(value)
    elif spec.kind == PERCENT:
        is_valid, result = validate_percent(value)
    elif spec.kind == AMOUNT:
        is_valid, result = validate_amount(value)
    elif spec.kind == TEAM:
        is_valid, result = validate_team(value)
    else:
        raise ValueError(f"Unknown field kind {spec.kind!r}")

    if not is_valid:
        return False, f"{spec.key}: {result}"
    return True, result

def validate_email_format(email):
    """Basic email format validation"""
    email_pattern = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'
    if isinstance(email, str) and re.match(email_pattern, email):
        return True, ""
    return False, "Invalid email format"
