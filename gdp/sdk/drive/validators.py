import re
from gdp.sdk.exceptions import LocalPathError, InvalidItemIdError

# Detects strings containing common path/filename indicators: slashes, tilde, or dots.
LOCAL_PATH_REGEX = re.compile(r'[\\/~.]')

# Drive IDs: alphanumeric, dashes, and underscores only, at most 128 characters.
VALID_ID_REGEX = re.compile(r'^[a-zA-Z0-9_-]{1,128}$')


def validate_item_id(item_id: str) -> None:
    """
    Validates a Drive file or folder ID.

    Args:
        item_id: The ID to check.

    Raises:
        LocalPathError: If the ID contains path indicators.
        InvalidItemIdError: If the ID is missing or malformed.
    """
    if not isinstance(item_id, str) or not item_id:
        raise InvalidItemIdError("Invalid item id.")

    if LOCAL_PATH_REGEX.search(item_id):
        raise LocalPathError("Invalid item id. This looks like a local path.")

    if not VALID_ID_REGEX.match(item_id):
        raise InvalidItemIdError("Invalid item id.")
