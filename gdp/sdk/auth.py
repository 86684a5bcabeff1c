"""Connection setup for GDP SDK.

Loads Google API credentials from explicit arguments or the gdp config
and builds the Drive service object that every SDK operation receives.
Token refresh is left to google-auth.
"""

import logging
from pathlib import Path
from typing import Tuple, Any, Optional

from googleapiclient.discovery import build

from .config import get_config_value

logger = logging.getLogger(__name__)

DRIVE_SCOPE = "https://www.googleapis.com/auth/drive"

AUTH_MODE_ADC = "adc"
AUTH_MODE_TOKEN = "token"


def _load_adc(label: str) -> Tuple[Any, str]:
    import google.auth

    creds, project = google.auth.default(scopes=[DRIVE_SCOPE])
    source = f"Application Default Credentials ({label})"
    if project:
        source += f" (project: {project})"
    return creds, source


def _load_token_file(token_file: str) -> Tuple[Any, str]:
    from google.oauth2.credentials import Credentials

    token_path = Path(token_file).expanduser()
    if not token_path.exists():
        raise FileNotFoundError(f"Token file not found: {token_path}")
    creds = Credentials.from_authorized_user_file(str(token_path))
    return creds, f"Token file: {token_path}"


def get_credentials(
    token_file: Optional[str] = None,
    use_adc: bool = False,
) -> Tuple[Any, str]:
    """
    Load credentials from explicit flags or the configured auth mode.

    Args:
        token_file: Authorized-user token JSON to load (overrides config)
        use_adc: Force use of Application Default Credentials

    Returns:
        Tuple of (credentials object, source description)

    Raises:
        ValueError: If no auth mode is configured
        FileNotFoundError: If the token file does not exist
    """
    if use_adc:
        return _load_adc("from flag")

    if token_file:
        return _load_token_file(token_file)

    mode = get_config_value("auth.mode")
    if mode == AUTH_MODE_ADC:
        return _load_adc("from config")
    if mode == AUTH_MODE_TOKEN:
        configured_file = get_config_value("auth.token_file")
        if not configured_file:
            raise ValueError("auth.mode is 'token' but auth.token_file is not set.")
        return _load_token_file(configured_file)

    raise ValueError(
        "No credentials configured. Run 'gdp config set auth.mode adc' "
        "or pass --token-file."
    )


def get_drive_service(creds: Any = None):
    """
    Build and return a Google Drive API service object.

    Args:
        creds: Credentials to use. Loaded via get_credentials() when omitted.

    Returns:
        Google Drive v3 service object
    """
    if creds is None:
        creds, source = get_credentials()
        logger.debug(f"Using credentials from {source}")
    return build("drive", "v3", credentials=creds, cache_discovery=False)
