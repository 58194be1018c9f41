"""High-level client for the Vessel Tracking API."""

import logging
from dataclasses import dataclass, field

import httpx

from vesselapi.auth import API_KEY_ENV_VAR, CredentialNotFoundError, CredentialResolver
from vesselapi.services import (
    EmissionsService,
    LocationService,
    NavtexService,
    PortEventsService,
    PortsService,
    SearchService,
    VesselsService,
)
from vesselapi.transport import create_transport_stack
from vesselapi.transport.retry import DEFAULT_MAX_RETRIES

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
DEFAULT_BASE_URL = "https://api.vesselapi.com/v1"
DEFAULT_USER_AGENT = f"vesselapi-python/{VERSION}"

BASE_URL_ENV_VAR = "VESSELAPI_BASE_URL"
USER_AGENT_ENV_VAR = "VESSELAPI_USER_AGENT"
MAX_RETRIES_ENV_VAR = "VESSELAPI_MAX_RETRIES"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration, fixed when the client is built.

    ``max_retries`` below zero is treated as zero.
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        if not self.api_key:
            raise CredentialNotFoundError("API key must not be empty", env_var_name=API_KEY_ENV_VAR)
        if self.max_retries < 0:
            object.__setattr__(self, "max_retries", 0)

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        max_retries: int | None = None,
        resolver: CredentialResolver | None = None,
    ) -> "ClientConfig":
        """Build a configuration from explicit values, the environment and defaults.

        Explicit arguments win over ``VESSELAPI_*`` environment variables,
        which win over the defaults.

        Raises:
            CredentialNotFoundError: If no API key is available
            ValueError: If ``VESSELAPI_MAX_RETRIES`` is not an integer
        """
        if resolver is None:
            resolver = CredentialResolver()

        if max_retries is None:
            raw_retries = resolver.resolve(env_var_name=MAX_RETRIES_ENV_VAR, mask_in_logs=False)
            try:
                max_retries = int(raw_retries) if raw_retries is not None else DEFAULT_MAX_RETRIES
            except ValueError:
                raise ValueError(f"{MAX_RETRIES_ENV_VAR} must be an integer, got {raw_retries!r}") from None

        return cls(
            api_key=resolver.resolve_api_key(api_key),
            base_url=resolver.resolve(
                value=base_url, env_var_name=BASE_URL_ENV_VAR, default=DEFAULT_BASE_URL, mask_in_logs=False
            ),
            user_agent=resolver.resolve(
                value=user_agent, env_var_name=USER_AGENT_ENV_VAR, default=DEFAULT_USER_AGENT, mask_in_logs=False
            ),
            max_retries=max_retries,
        )


class VesselClient:
    """Client for the Vessel Tracking API.

    Requests go through a retry layer and an authentication layer before
    reaching the network. Endpoints are grouped by resource:

    - ``vessels``: vessel details, positions, casualties, inspections, ...
    - ``ports``: port lookup
    - ``port_events``: arrivals and departures
    - ``emissions``: emissions reports
    - ``search``: search by name and attributes
    - ``location``: bounding box and radius queries
    - ``navtex``: NAVTEX messages

    Args:
        api_key: API key. Falls back to ``VESSELAPI_API_KEY`` (or the file
            named by ``VESSELAPI_API_KEY_FILE``).
        base_url: API base URL. Falls back to ``VESSELAPI_BASE_URL``, then
            ``DEFAULT_BASE_URL``.
        http_client: Client whose transport performs the I/O. Its timeout,
            redirect policy and cookie jar are kept; only its transport is
            wrapped. Its ``mounts`` (per-URL transports, proxy routing) are
            not carried over, every request goes through the default
            transport. The caller stays responsible for closing it.
        user_agent: ``User-Agent`` header value.
        max_retries: Maximum retries for 429, 5xx and transient network
            errors (default: 3). Negative values disable retries.
        config: Complete configuration; when given, the arguments above
            other than ``http_client`` are ignored.
        load_dotenv: Whether to load a .env file when resolving settings.

    Example:
        ```python
        async with VesselClient("your-api-key") as client:
            vessel = await client.vessels.get("9363728")

            async for event in client.port_events.all_by_port("NLRTM"):
                print(event)
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        user_agent: str | None = None,
        max_retries: int | None = None,
        config: ClientConfig | None = None,
        load_dotenv: bool = True,
    ) -> None:
        if config is None:
            config = ClientConfig.from_env(
                api_key=api_key,
                base_url=base_url,
                user_agent=user_agent,
                max_retries=max_retries,
                resolver=CredentialResolver(load_dotenv=load_dotenv),
            )
        self.config = config

        base_transport = None
        client_kwargs = {}
        if http_client is not None:
            # httpx exposes no public accessor for a client's transport
            base_transport = http_client._transport
            client_kwargs = {
                "timeout": http_client.timeout,
                "follow_redirects": http_client.follow_redirects,
                "max_redirects": http_client.max_redirects,
                "cookies": http_client.cookies.jar,
            }
        self._owns_transport = http_client is None

        transport = create_transport_stack(
            api_key=config.api_key,
            user_agent=config.user_agent,
            max_retries=config.max_retries,
            base_transport=base_transport,
        )
        self._http = httpx.AsyncClient(base_url=config.base_url, transport=transport, **client_kwargs)

        self.vessels = VesselsService(self._http)
        self.ports = PortsService(self._http)
        self.port_events = PortEventsService(self._http)
        self.emissions = EmissionsService(self._http)
        self.search = SearchService(self._http)
        self.location = LocationService(self._http)
        self.navtex = NavtexService(self._http)

        logger.debug(f"Created VesselClient for {config.base_url} (max_retries={config.max_retries})")

    @property
    def http(self) -> httpx.AsyncClient:
        """The authenticated, retrying ``httpx.AsyncClient`` used by the services."""
        return self._http

    async def aclose(self) -> None:
        """Close the client.

        The connection pool is only closed when this client created it; a
        transport borrowed from ``http_client`` is left to its owner.
        """
        if self._owns_transport:
            await self._http.aclose()

    async def __aenter__(self) -> "VesselClient":
        return self

    async def __aexit__(self, exc_type=None, exc_val=None, exc_tb=None) -> None:
        await self.aclose()
