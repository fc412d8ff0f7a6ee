"""API key lookup.

The Neople open API authenticates every request with one key, sent in the
``apikey`` header. ``ApiKeyResolver.resolve`` returns the first key found in:

1. the value passed in
2. ``$DF_API_KEY`` (a ``.env`` file is merged into the environment first)
3. the file named by ``$DF_API_KEY_FILE``

Example:
    ```python
    from df_client.auth import ApiKeyResolver

    api_key = ApiKeyResolver().resolve()
    ```

Keys are never logged; only the source they came from is.
"""

import logging
import os
from pathlib import Path
from threading import Lock

import dotenv

from df_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ENV_VAR = "DF_API_KEY"
DEFAULT_FILE_ENV_VAR = "DF_API_KEY_FILE"

_dotenv_lock = Lock()


class ApiKeyResolver:
    """Find the API key in the caller's environment.

    Args:
        dotenv_path: ``.env`` file to merge into ``os.environ``. If None,
            python-dotenv's ``find_dotenv`` search is used.
        use_dotenv: Skip the ``.env`` file entirely when False.
    """

    def __init__(self, dotenv_path: str | os.PathLike | None = None, use_dotenv: bool = True):
        self.dotenv_path = dotenv_path
        self.dotenv_loaded = False
        if use_dotenv:
            self.load_dotenv()

    def load_dotenv(self) -> None:
        """Merge the ``.env`` file into the environment, once per resolver.

        Variables already set in the environment are left alone.
        """
        with _dotenv_lock:
            if self.dotenv_loaded:
                return
            try:
                found = dotenv.load_dotenv(self.dotenv_path)
            except OSError as e:
                logger.warning(f"Could not read .env file: {e}")
                found = False
            self.dotenv_loaded = True
        logger.debug(f".env file {'merged' if found else 'not found'}")

    def from_env(self, env_var: str = DEFAULT_ENV_VAR) -> str | None:
        """The stripped value of ``env_var``, or None if unset or blank."""
        return os.environ.get(env_var, "").strip() or None

    def from_file(
        self,
        path: str | os.PathLike | None = None,
        *,
        path_env_var: str = DEFAULT_FILE_ENV_VAR,
        strict: bool = False,
    ) -> str | None:
        """Read a key from a file.

        ``~`` and ``$VAR`` in the path are expanded and surrounding whitespace
        is stripped from the contents.

        Args:
            path: The key file. Taken from ``path_env_var`` when None.
            path_env_var: Environment variable naming the key file.
            strict: Raise instead of returning None when there is no file
                to read.

        Raises:
            CredentialFileError: If ``strict`` and no readable file was given.
        """
        if path is None:
            path = self.from_env(path_env_var)
        if path is None:
            if strict:
                raise CredentialFileError(f"No API key file given and {path_env_var} is not set")
            return None

        key_path = Path(os.path.expandvars(os.fspath(path))).expanduser()
        try:
            key = key_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            if strict:
                raise CredentialFileError(f"API key file not found: {key_path}") from None
            logger.debug(f"No API key file at {key_path}")
            return None
        except OSError as e:
            if strict:
                raise CredentialFileError(f"Cannot read API key file {key_path}: {e}") from e
            logger.warning(f"Skipping unreadable API key file {key_path}: {e}")
            return None

        return key or None

    def resolve(
        self,
        value: str | None = None,
        *,
        env_var: str = DEFAULT_ENV_VAR,
        file_env_var: str = DEFAULT_FILE_ENV_VAR,
    ) -> str:
        """Return the first key found, in priority order.

        Raises:
            CredentialNotFoundError: If no source has a key.
        """
        sources = (
            ("explicit value", lambda: value or None),
            (f"${env_var}", lambda: self.from_env(env_var)),
            (f"file named by ${file_env_var}", lambda: self.from_file(path_env_var=file_env_var)),
        )
        for source, lookup in sources:
            key = lookup()
            if key:
                logger.debug(f"Using API key from {source}")
                return key

        raise CredentialNotFoundError(
            f"No API key found (checked {env_var} and {file_env_var})",
            env_var_name=env_var,
        )
