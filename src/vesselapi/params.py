"""Request parameters for Vessel API endpoints.

Parameters are frozen dataclasses. Each field maps to one query parameter
of the API (``filter.idType``, ``pagination.nextToken``, ...); fields left
as None are not sent.
"""

from dataclasses import MISSING, dataclass, field, fields
from datetime import datetime
from enum import StrEnum
from typing import Any


class IdType(StrEnum):
    """How a vessel identifier should be interpreted."""

    IMO = "imo"
    MMSI = "mmsi"


def query(name: str, default: Any = None) -> Any:
    """Declare a dataclass field sent as query parameter ``name``."""
    if default is MISSING:
        return field(metadata={"query": name})
    return field(default=default, metadata={"query": name})


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, StrEnum):
        return value.value
    return str(value)


@dataclass(frozen=True, kw_only=True)
class QueryParams:
    """Base class for endpoint parameters."""

    def to_query(self) -> dict[str, str]:
        """Return the query parameters to send, skipping unset fields."""
        params = {}
        for f in fields(self):
            name = f.metadata.get("query")
            value = getattr(self, f.name)
            if name is None or value is None:
                continue
            params[name] = _format_value(value)
        return params


@dataclass(frozen=True, kw_only=True)
class PageParams(QueryParams):
    """Pagination controls shared by all list endpoints."""

    pagination_limit: int | None = query("pagination.limit")
    pagination_next_token: str | None = query("pagination.nextToken")


@dataclass(frozen=True, kw_only=True)
class VesselParams(QueryParams):
    """Parameters for endpoints addressing a single vessel."""

    filter_id_type: IdType = query("filter.idType", IdType.IMO)


@dataclass(frozen=True, kw_only=True)
class VesselPageParams(VesselParams, PageParams):
    """Paginated endpoints addressing a single vessel."""


@dataclass(frozen=True, kw_only=True)
class VesselPositionsParams(VesselPageParams):
    """Positions for several vessels, ``filter_ids`` is comma separated."""

    filter_ids: str = query("filter.ids", MISSING)


@dataclass(frozen=True, kw_only=True)
class TimeRangeParams(PageParams):
    time_from: datetime | str | None = query("time.from")
    time_to: datetime | str | None = query("time.to")


@dataclass(frozen=True, kw_only=True)
class PortEventsParams(TimeRangeParams):
    filter_country: str | None = query("filter.country")
    filter_event_type: str | None = query("filter.eventType")


@dataclass(frozen=True, kw_only=True)
class PortEventsByPortParams(TimeRangeParams):
    filter_event_type: str | None = query("filter.eventType")


@dataclass(frozen=True, kw_only=True)
class PortEventsByPortsParams(TimeRangeParams):
    filter_port_name: str = query("filter.portName", MISSING)
    filter_event_type: str | None = query("filter.eventType")


@dataclass(frozen=True, kw_only=True)
class PortEventsByVesselParams(VesselPageParams):
    time_from: datetime | str | None = query("time.from")
    time_to: datetime | str | None = query("time.to")
    filter_event_type: str | None = query("filter.eventType")


@dataclass(frozen=True, kw_only=True)
class PortEventsByVesselsParams(TimeRangeParams):
    filter_vessel_name: str = query("filter.vesselName", MISSING)
    filter_event_type: str | None = query("filter.eventType")


@dataclass(frozen=True, kw_only=True)
class EmissionsParams(PageParams):
    filter_period: int | None = query("filter.period")


@dataclass(frozen=True, kw_only=True)
class SearchVesselsParams(PageParams):
    filter_name: str | None = query("filter.name")
    filter_flag: str | None = query("filter.flag")
    filter_vessel_type: str | None = query("filter.vesselType")


@dataclass(frozen=True, kw_only=True)
class SearchPortsParams(PageParams):
    filter_name: str | None = query("filter.name")
    filter_country: str | None = query("filter.country")
    filter_type: str | None = query("filter.type")
    filter_harbor_size: str | None = query("filter.harborSize")


@dataclass(frozen=True, kw_only=True)
class SearchByNameParams(PageParams):
    """Name search for DGPS stations, light aids, MODUs and radio beacons."""

    filter_name: str = query("filter.name", MISSING)


@dataclass(frozen=True, kw_only=True)
class BoundingBoxParams(PageParams):
    filter_lon_left: float | None = query("filter.lonLeft")
    filter_lon_right: float | None = query("filter.lonRight")
    filter_lat_bottom: float | None = query("filter.latBottom")
    filter_lat_top: float | None = query("filter.latTop")


@dataclass(frozen=True, kw_only=True)
class RadiusParams(PageParams):
    """Circle search, ``filter_radius`` is in meters."""

    filter_radius: int = query("filter.radius", MISSING)
    filter_longitude: float | None = query("filter.longitude")
    filter_latitude: float | None = query("filter.latitude")


@dataclass(frozen=True, kw_only=True)
class NavtexParams(TimeRangeParams):
    pass
