"""Short identifier generation.

Used to name tag groups that are created without an explicit name. The ids
are short and printable; collisions are possible and not handled.
"""

import secrets
import string

from tagkit.config import get_settings
from tagkit.util.logging import get_logger

logger = get_logger(__name__)

ALPHABET = string.digits + string.ascii_letters + "_-"


def generate_short_id(length: int | None = None) -> str:
    """Generate a random URL-safe short identifier.

    Args:
        length: Number of characters, defaults to identifiers.length from settings

    Returns:
        Identifier such as "dppUr5-Xq"
    """
    if length is None:
        length = get_settings().identifiers.length
    short_id = "".join(secrets.choice(ALPHABET) for _ in range(length))
    logger.debug(f"Generated short id: {short_id}")
    return short_id
