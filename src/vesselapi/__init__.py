"""vesselapi - Python client for the Vessel Tracking API.

The client layers a resilient transport stack under resource services:
- Bearer authentication and User-Agent identification on every request
- Retries for rate limiting (429), server errors and transient network
  failures, honouring Retry-After, without repeating non-idempotent requests
  the server may already have applied
- Structured errors with the API's message and the raw response body
- Lazy iterators over paginated list endpoints

Example:
    ```python
    from vesselapi import VesselClient
    from vesselapi.params import SearchVesselsParams

    async with VesselClient("your-api-key") as client:
        vessel = await client.vessels.get("9363728")

        vessels = await client.search.all_vessels(SearchVesselsParams(filter_name="EVER")).collect_all()
    ```
"""

from vesselapi.client import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, VERSION, ClientConfig, VesselClient
from vesselapi.errors import APIError, error_from_status
from vesselapi.pagination import PageIterator

__version__ = VERSION

__all__ = [
    "APIError",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "PageIterator",
    "VesselClient",
    "__version__",
    "error_from_status",
]
