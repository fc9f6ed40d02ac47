"""
Payload decoding helpers shared by the record types.
"""


class PayloadError(ValueError):
    """Raised when an API or persisted payload does not match its record type."""


def ensure_mapping(data, record):
    if not isinstance(data, dict):
        raise PayloadError(f'{record} payload must be an object, got {type(data).__name__}')
    return data


def record_id(data, record):
    """Return the record id, accepting both ``_id`` and ``id``."""
    value = data.get('_id', data.get('id'))
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value:
        raise PayloadError(f'{record} payload is missing an id')
    return value


def required_str(data, key, record):
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise PayloadError(f'{record} payload is missing "{key}"')
    return value


def optional_str(data, key, default=None):
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        return str(value)
    return value


def optional_number(data, key, default=0):
    value = data.get(key)
    if value is None or value == '':
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
    raise PayloadError(f'"{key}" must be a number')


def optional_bool(data, key, default=False):
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes')
    return bool(value)


def decode_list(items, record_cls):
    """Decode a list payload; accepts a bare list or ``{"data": [...]}``."""
    if isinstance(items, dict):
        for key in ('data', 'items', record_cls.collection_key):
            if isinstance(items.get(key), list):
                items = items[key]
                break
    if not isinstance(items, list):
        raise PayloadError(f'{record_cls.__name__} list payload must be an array')
    return [record_cls.from_dict(item) for item in items]


def unwrap(payload):
    """Return ``payload["data"]`` when the API wraps a single record."""
    if isinstance(payload, dict) and isinstance(payload.get('data'), dict):
        return payload['data']
    return payload
