"""API key lookup for the Neople open API.

Example:
    ```python
    from df_client.auth import ApiKeyResolver

    api_key = ApiKeyResolver(dotenv_path="config/.env").resolve()
    ```
"""

from df_client.auth.credentials import DEFAULT_ENV_VAR, DEFAULT_FILE_ENV_VAR, ApiKeyResolver
from df_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "DEFAULT_ENV_VAR",
    "DEFAULT_FILE_ENV_VAR",
    "ApiKeyResolver",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
]
