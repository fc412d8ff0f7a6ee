"""Client for the Neople Dungeon&Fighter open API.

``DfClient`` owns one ``httpx.AsyncClient`` with the API key header set,
builds request URLs, issues GETs and classifies responses. Resource handlers
(``character()``, ``item()``, ``auction()``, ``image()``) are created from it
per call chain.

Example:
    ```python
    from df_client import DfClient

    async with DfClient.from_env() as client:
        rows = await client.auction().item_name("무색 큐브 조각").limit(10).search()
    ```
"""

import logging
from collections.abc import Sequence
from threading import Lock

import httpx

from df_client.api import AuctionHandler, CharacterHandler, ImageHandler, ItemHandler
from df_client.auth import DEFAULT_ENV_VAR, DEFAULT_FILE_ENV_VAR, ApiKeyResolver, CredentialNotFoundError
from df_client.errors import AlreadyInitializedError, NotInitializedError, raise_for_status
from df_client.query import SearchParameter, compose_query

logger = logging.getLogger(__name__)

DF_BASE_URL = "https://api.neople.co.kr/df"
API_KEY_HEADER = "apikey"


class DfClient:
    """Request pipeline shared by all resource handlers.

    Args:
        api_key: Neople open API key, attached to every request.
        base_url: Base for relative paths.
        transport: Optional httpx transport (mock transports in tests, or
            ``df_client.transport.RateLimitRetry`` for callers that want
            rate-limit retries).
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DF_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise CredentialNotFoundError("API key must not be empty")
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(headers={API_KEY_HEADER: api_key}, transport=transport)

    @classmethod
    def from_env(
        cls,
        *,
        env_var_name: str = DEFAULT_ENV_VAR,
        file_env_var_name: str = DEFAULT_FILE_ENV_VAR,
        dotenv_path: str | None = None,
        **kwargs,
    ) -> "DfClient":
        """Build a client with the API key taken from the environment.

        The key is read from ``env_var_name`` (a .env file is merged first),
        falling back to the file named by ``file_env_var_name``.

        Raises:
            CredentialNotFoundError: If neither source has a key.
        """
        resolver = ApiKeyResolver(dotenv_path=dotenv_path)
        api_key = resolver.resolve(env_var=env_var_name, file_env_var=file_env_var_name)
        return cls(api_key, **kwargs)

    async def __aenter__(self) -> "DfClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def build_url(self, path: str, query: str = "") -> str:
        """Join ``path`` onto the base URL and append ``query``.

        Fully qualified URLs (the image host) are used as-is.
        """
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self.base_url}/{path.lstrip('/')}"
        return f"{url}?{query}" if query else url

    async def get(
        self,
        path: str,
        param: SearchParameter | None = None,
        identity: Sequence[tuple[str, str]] = (),
    ) -> httpx.Response:
        """Issue one GET and classify the response.

        Args:
            path: Relative path or absolute URL.
            param: Generic search parameters, or None.
            identity: Identifying pairs percent-encoded ahead of ``param``.

        Returns:
            The 2xx response, body unread by this layer.

        Raises:
            APIError: For classified non-2xx responses.
            ResponseDecodeError: For non-2xx responses that cannot be classified.
            httpx.HTTPError: For transport failures.
        """
        url = self.build_url(path, compose_query(identity, param))
        logger.debug(f"GET {url}")
        response = await self._http.get(url)
        raise_for_status(response)
        return response

    def character(self) -> CharacterHandler:
        return CharacterHandler(self)

    def item(self) -> ItemHandler:
        return ItemHandler(self)

    def auction(self) -> AuctionHandler:
        return AuctionHandler(self)

    def image(self) -> ImageHandler:
        return ImageHandler(self)


_instance: DfClient | None = None
_instance_lock = Lock()


def initialise(api_key: str, **kwargs) -> DfClient:
    """Create the process-wide shared client.

    Raises:
        AlreadyInitializedError: If called more than once.
    """
    global _instance
    with _instance_lock:
        if _instance is not None:
            raise AlreadyInitializedError("DfClient is already initialised")
        _instance = DfClient(api_key, **kwargs)
        return _instance


def instance() -> DfClient:
    """Return the shared client created by ``initialise``.

    Raises:
        NotInitializedError: If ``initialise`` has not been called.
    """
    if _instance is None:
        raise NotInitializedError("call df_client.initialise(api_key) first")
    return _instance
