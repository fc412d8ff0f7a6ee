"""Optional httpx transports for ``DfClient``."""

from df_client.transport.retry import RateLimitRetry

__all__ = ["RateLimitRetry"]
