import logging
import secrets
import string
from typing import Container

logger = logging.getLogger(__name__)

# Base62 alphabet, case-sensitive
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
SHORT_CODE_LENGTH = 7


def generate_short_code() -> str:
    """Generate a random 7-character Base62 code."""
    return ''.join(secrets.choice(ALPHABET) for _ in range(SHORT_CODE_LENGTH))


def generate_unique_code(allocated: Container[str]) -> str:
    """Draw codes until one is not in ``allocated``.

    The caller must hold the store lock until the returned code is registered.
    """
    attempt = 0
    while True:
        attempt += 1
        code = generate_short_code()
        if code not in allocated:
            return code
        logger.debug("Short code collision on attempt %d: %s", attempt, code)
