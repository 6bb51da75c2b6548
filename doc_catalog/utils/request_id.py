"""Short request ids used to correlate log lines"""
import random
import string
from typing import Optional

REQUEST_ID_LENGTH = 6
REQUEST_ID_CHARACTERS = string.ascii_uppercase + string.digits


def generate_request_id(length: int = REQUEST_ID_LENGTH) -> str:
    """
    Generate a random request ID of uppercase letters and digits.

    Args:
        length: Length of the request ID (default: 6)
    """
    return ''.join(random.choices(REQUEST_ID_CHARACTERS, k=length))


def validate_request_id(request_id: Optional[str], length: int = REQUEST_ID_LENGTH) -> bool:
    """True when ``request_id`` has the generated format"""
    if not request_id or len(request_id) != length:
        return False
    return all(c in REQUEST_ID_CHARACTERS for c in request_id)
