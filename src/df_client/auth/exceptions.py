"""Exceptions raised while looking up the API key."""

from df_client.errors.exceptions import DfError


class CredentialError(DfError):
    pass


class CredentialNotFoundError(CredentialError):
    """No source had an API key.

    Attributes:
        env_var_name: The environment variable that was checked, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """An API key file was required but could not be read."""
