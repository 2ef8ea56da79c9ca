from collections import namedtuple
from enum import Enum

# key: external (camelCase) name, also the column name in the store
# attr: mapped attribute on the model
# kind: one of the kinds below, or an Enum class
FieldSpec = namedtuple('FieldSpec', ['key', 'attr', 'kind'])

TEXT = 'text'
DATE = 'date'
INTEGER = 'integer'
PERCENT = 'percent'
AMOUNT = 'amount'
TEAM = 'team'


def serialize_fields(instance, fields):
    data = {}
    for spec in fields:
        value = getattr(instance, spec.attr)
        if isinstance(value, Enum):
            value = value.value
        data[spec.key] = value
    return data


def serialize_timestamps(instance):
    return {
        'createdAt': instance.created_at.isoformat() if instance.created_at else None,
        'updatedAt': instance.updated_at.isoformat() if instance.updated_at else None,
    }
