from uuid import UUID

from lockbox.core.errors import NotFound


def parse_id(value: str, not_found_message: str) -> UUID:
    """Parse a path identifier, treating anything that is not a UUID as missing.

    A malformed id can never name a stored record, so it gets the same
    ``NotFound`` as an id that is absent or owned by someone else.
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise NotFound(not_found_message)
