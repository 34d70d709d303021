"""
Logging Sanitizer Utility

Redacts sensitive values from request payloads before they are logged.
License keys are treated as secrets alongside the usual credential fields.
"""

from typing import Dict, Any, Optional


# Fields that should never be logged
SENSITIVE_FIELDS = {
    'license_key',
    'product_key',
    'password',
    'secret',
    'token',
    'api_key',
    'apikey',
    'auth_token',
    'access_token',
    'refresh_token',
    'session_id',
    'credit_card',
    'creditcard',
    'cvv',
}


def sanitize_dict(data: Dict[str, Any], redact_text: str = '[REDACTED]') -> Dict[str, Any]:
    """
    Sanitize a dictionary by replacing sensitive field values with redaction text.

    Args:
        data: Dictionary to sanitize
        redact_text: Text to use for redacted values (default: '[REDACTED]')

    Returns:
        Sanitized copy with sensitive values replaced

    Example:
        >>> sanitize_dict({'license_name': 'Office', 'license_key': 'AAAA-BBBB'})
        {'license_name': 'Office', 'license_key': '[REDACTED]'}
    """
    if not data:
        return data

    sanitized = {}
    for key, value in data.items():
        if isinstance(key, str) and key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = redact_text
        elif isinstance(value, dict):
            sanitized[key] = sanitize_dict(value, redact_text)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_dict(item, redact_text) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            sanitized[key] = value

    return sanitized


def sanitize_json_body(body: Optional[Any], redact_text: str = '[REDACTED]') -> Optional[Any]:
    """
    Sanitize a parsed JSON request body for safe logging.

    Non-dict bodies (lists, scalars, None) are returned as-is except that
    dicts inside a top-level list are sanitized.
    """
    if isinstance(body, dict):
        return sanitize_dict(body, redact_text)
    if isinstance(body, list):
        return [sanitize_dict(item, redact_text) if isinstance(item, dict) else item for item in body]
    return body
