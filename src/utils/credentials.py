"""Service-account credential construction for Google Cloud clients."""

from google.oauth2 import service_account

from src.utils.config import GoogleCloudConfig

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"
_TOKEN_URI = "https://oauth2.googleapis.com/token"


def normalize_private_key(private_key: str) -> str:
    """Turn escaped ``\\n`` sequences from env files into real newlines."""
    return private_key.replace("\\n", "\n")


def build_credentials(config: GoogleCloudConfig) -> service_account.Credentials:
    """Build scoped service-account credentials from configured identity.

    Args:
        config: Google Cloud section of the application config.

    Returns:
        Credentials scoped to the cloud-platform API surface.

    Raises:
        ValueError: If the service-account email or private key is missing.
    """
    if not config.client_email or not config.private_key:
        raise ValueError("Service account credentials are not configured")

    info = {
        "type": "service_account",
        "project_id": config.project_id,
        "client_email": config.client_email,
        "private_key": normalize_private_key(config.private_key),
        "token_uri": _TOKEN_URI,
    }
    return service_account.Credentials.from_service_account_info(
        info, scopes=[CLOUD_PLATFORM_SCOPE]
    )
