import logging

from sqlalchemy.exc import IntegrityError

from app.errors import ConstraintViolation, ValidationError
from app.extensions import db
from app.utils.validators import validate_field, validate_required_fields

logger = logging.getLogger(__name__)


def require_fields(data, required_fields):
    is_valid, error = validate_required_fields(data, required_fields)
    if not is_valid:
        raise ValidationError(error)


def parse_fields(data, fields):
    """Map external keys to model attributes, validating each value.

    Missing keys become None: writes replace every column.
    """
    values = {}
    for spec in fields:
        is_valid, result = validate_field(spec, data.get(spec.key))
        if not is_valid:
            raise ValidationError(result)
        values[spec.attr] = result
    return values


def clean_id(value):
    if value is None:
        return ''
    return str(value).strip()


def commit_or_raise(action):
    """Commit the session, turning constraint failures into ConstraintViolation"""
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.warning('Constraint violation while %s: %s', action, e.orig)
        raise ConstraintViolation(f'Constraint violation while {action}: {e.orig}') from e
    except Exception:
        db.session.rollback()
        logger.exception('Failed while %s', action)
        raise
