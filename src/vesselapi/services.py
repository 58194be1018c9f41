"""Resource services wrapping the Vessel API endpoints.

Each method performs one request and returns the decoded JSON object of the
response, or raises an ``APIError``. Methods named ``all_*`` / ``list_all``
return a ``PageIterator`` walking every page of the corresponding list
endpoint.
"""

from typing import Any
from urllib.parse import quote

import httpx

from vesselapi.errors import decode_response
from vesselapi.pagination import PageIterator, paginate
from vesselapi.params import (
    BoundingBoxParams,
    EmissionsParams,
    NavtexParams,
    PortEventsByPortParams,
    PortEventsByPortsParams,
    PortEventsByVesselParams,
    PortEventsByVesselsParams,
    PortEventsParams,
    QueryParams,
    RadiusParams,
    SearchByNameParams,
    SearchPortsParams,
    SearchVesselsParams,
    VesselPageParams,
    VesselParams,
    VesselPositionsParams,
)

JSONObject = dict[str, Any]


def _path(*segments: str) -> str:
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


class BaseService:
    """Shared request plumbing for the resource services."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def _get(self, path: str, params: QueryParams | None = None) -> JSONObject:
        response = await self._http.get(path, params=params.to_query() if params is not None else None)
        return decode_response(response)


class VesselsService(BaseService):
    """Vessel details, positions and records, addressed by IMO or MMSI."""

    async def get(self, vessel_id: str, params: VesselParams | None = None) -> JSONObject:
        return await self._get(_path("vessel", vessel_id), params or VesselParams())

    async def position(self, vessel_id: str, params: VesselParams | None = None) -> JSONObject:
        return await self._get(_path("vessel", vessel_id, "position"), params or VesselParams())

    async def casualties(self, vessel_id: str, params: VesselPageParams | None = None) -> JSONObject:
        return await self._get(_path("vessel", vessel_id, "casualties"), params or VesselPageParams())

    async def classification(self, vessel_id: str, params: VesselParams | None = None) -> JSONObject:
        return await self._get(_path("vessel", vessel_id, "classification"), params or VesselParams())

    async def emissions(self, vessel_id: str, params: VesselPageParams | None = None) -> JSONObject:
        return await self._get(_path("vessel", vessel_id, "emissions"), params or VesselPageParams())

    async def eta(self, vessel_id: str, params: VesselParams | None = None) -> JSONObject:
        return await self._get(_path("vessel", vessel_id, "eta"), params or VesselParams())

    async def inspections(self, vessel_id: str, params: VesselParams | None = None) -> JSONObject:
        return await self._get(_path("vessel", vessel_id, "inspections"), params or VesselParams())

    async def inspection_detail(
        self, vessel_id: str, detail_id: str, params: VesselParams | None = None
    ) -> JSONObject:
        return await self._get(_path("vessel", vessel_id, "inspections", detail_id), params or VesselParams())

    async def ownership(self, vessel_id: str, params: VesselParams | None = None) -> JSONObject:
        return await self._get(_path("vessel", vessel_id, "ownership"), params or VesselParams())

    async def positions(self, params: VesselPositionsParams) -> JSONObject:
        return await self._get(_path("vessels", "positions"), params)

    def all_casualties(self, vessel_id: str, params: VesselPageParams | None = None) -> PageIterator[JSONObject]:
        return paginate(lambda p: self.casualties(vessel_id, p), params or VesselPageParams(), "casualties")

    def all_emissions(self, vessel_id: str, params: VesselPageParams | None = None) -> PageIterator[JSONObject]:
        return paginate(lambda p: self.emissions(vessel_id, p), params or VesselPageParams(), "emissions")

    def all_positions(self, params: VesselPositionsParams) -> PageIterator[JSONObject]:
        return paginate(self.positions, params, "vesselPositions")


class PortsService(BaseService):
    """Port lookup by UN/LOCODE."""

    async def get(self, unlocode: str) -> JSONObject:
        return await self._get(_path("port", unlocode))


class PortEventsService(BaseService):
    """Port arrivals and departures."""

    async def list(self, params: PortEventsParams | None = None) -> JSONObject:
        return await self._get(_path("portevents"), params or PortEventsParams())

    async def by_port(self, unlocode: str, params: PortEventsByPortParams | None = None) -> JSONObject:
        return await self._get(_path("portevents", "port", unlocode), params or PortEventsByPortParams())

    async def by_ports(self, params: PortEventsByPortsParams) -> JSONObject:
        return await self._get(_path("portevents", "ports"), params)

    async def by_vessel(self, vessel_id: str, params: PortEventsByVesselParams | None = None) -> JSONObject:
        return await self._get(_path("portevents", "vessel", vessel_id), params or PortEventsByVesselParams())

    async def last_by_vessel(self, vessel_id: str, params: VesselParams | None = None) -> JSONObject:
        return await self._get(_path("portevents", "vessel", vessel_id, "last"), params or VesselParams())

    async def by_vessels(self, params: PortEventsByVesselsParams) -> JSONObject:
        return await self._get(_path("portevents", "vessels"), params)

    def list_all(self, params: PortEventsParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.list, params or PortEventsParams(), "portEvents")

    def all_by_port(self, unlocode: str, params: PortEventsByPortParams | None = None) -> PageIterator[JSONObject]:
        return paginate(lambda p: self.by_port(unlocode, p), params or PortEventsByPortParams(), "portEvents")

    def all_by_ports(self, params: PortEventsByPortsParams) -> PageIterator[JSONObject]:
        return paginate(self.by_ports, params, "portEvents")

    def all_by_vessel(
        self, vessel_id: str, params: PortEventsByVesselParams | None = None
    ) -> PageIterator[JSONObject]:
        return paginate(lambda p: self.by_vessel(vessel_id, p), params or PortEventsByVesselParams(), "portEvents")

    def all_by_vessels(self, params: PortEventsByVesselsParams) -> PageIterator[JSONObject]:
        return paginate(self.by_vessels, params, "portEvents")


class EmissionsService(BaseService):
    """Fleet-wide emissions reports."""

    async def list(self, params: EmissionsParams | None = None) -> JSONObject:
        return await self._get(_path("emissions"), params or EmissionsParams())

    def list_all(self, params: EmissionsParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.list, params or EmissionsParams(), "emissions")


class SearchService(BaseService):
    """Search by name and attributes."""

    async def vessels(self, params: SearchVesselsParams | None = None) -> JSONObject:
        return await self._get(_path("search", "vessels"), params or SearchVesselsParams())

    async def ports(self, params: SearchPortsParams | None = None) -> JSONObject:
        return await self._get(_path("search", "ports"), params or SearchPortsParams())

    async def dgps(self, params: SearchByNameParams) -> JSONObject:
        return await self._get(_path("search", "dgps"), params)

    async def light_aids(self, params: SearchByNameParams) -> JSONObject:
        return await self._get(_path("search", "lightaids"), params)

    async def modus(self, params: SearchByNameParams) -> JSONObject:
        return await self._get(_path("search", "modus"), params)

    async def radio_beacons(self, params: SearchByNameParams) -> JSONObject:
        return await self._get(_path("search", "radiobeacons"), params)

    def all_vessels(self, params: SearchVesselsParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.vessels, params or SearchVesselsParams(), "vessels")

    def all_ports(self, params: SearchPortsParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.ports, params or SearchPortsParams(), "ports")

    def all_dgps(self, params: SearchByNameParams) -> PageIterator[JSONObject]:
        return paginate(self.dgps, params, "dgpsStations")

    def all_light_aids(self, params: SearchByNameParams) -> PageIterator[JSONObject]:
        return paginate(self.light_aids, params, "lightAids")

    def all_modus(self, params: SearchByNameParams) -> PageIterator[JSONObject]:
        return paginate(self.modus, params, "modus")

    def all_radio_beacons(self, params: SearchByNameParams) -> PageIterator[JSONObject]:
        return paginate(self.radio_beacons, params, "radioBeacons")


class LocationService(BaseService):
    """Entities inside a bounding box or within a radius of a point."""

    async def vessels_bounding_box(self, params: BoundingBoxParams | None = None) -> JSONObject:
        return await self._get(_path("location", "vessels", "bounding-box"), params or BoundingBoxParams())

    async def vessels_radius(self, params: RadiusParams) -> JSONObject:
        return await self._get(_path("location", "vessels", "radius"), params)

    async def ports_bounding_box(self, params: BoundingBoxParams | None = None) -> JSONObject:
        return await self._get(_path("location", "ports", "bounding-box"), params or BoundingBoxParams())

    async def ports_radius(self, params: RadiusParams) -> JSONObject:
        return await self._get(_path("location", "ports", "radius"), params)

    async def dgps_bounding_box(self, params: BoundingBoxParams | None = None) -> JSONObject:
        return await self._get(_path("location", "dgps", "bounding-box"), params or BoundingBoxParams())

    async def dgps_radius(self, params: RadiusParams) -> JSONObject:
        return await self._get(_path("location", "dgps", "radius"), params)

    async def light_aids_bounding_box(self, params: BoundingBoxParams | None = None) -> JSONObject:
        return await self._get(_path("location", "lightaids", "bounding-box"), params or BoundingBoxParams())

    async def light_aids_radius(self, params: RadiusParams) -> JSONObject:
        return await self._get(_path("location", "lightaids", "radius"), params)

    async def modus_bounding_box(self, params: BoundingBoxParams | None = None) -> JSONObject:
        return await self._get(_path("location", "modu", "bounding-box"), params or BoundingBoxParams())

    async def modus_radius(self, params: RadiusParams) -> JSONObject:
        return await self._get(_path("location", "modu", "radius"), params)

    async def radio_beacons_bounding_box(self, params: BoundingBoxParams | None = None) -> JSONObject:
        return await self._get(_path("location", "radiobeacons", "bounding-box"), params or BoundingBoxParams())

    async def radio_beacons_radius(self, params: RadiusParams) -> JSONObject:
        return await self._get(_path("location", "radiobeacons", "radius"), params)

    def all_vessels_bounding_box(self, params: BoundingBoxParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.vessels_bounding_box, params or BoundingBoxParams(), "vessels")

    def all_vessels_radius(self, params: RadiusParams) -> PageIterator[JSONObject]:
        return paginate(self.vessels_radius, params, "vessels")

    def all_ports_bounding_box(self, params: BoundingBoxParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.ports_bounding_box, params or BoundingBoxParams(), "ports")

    def all_ports_radius(self, params: RadiusParams) -> PageIterator[JSONObject]:
        return paginate(self.ports_radius, params, "ports")

    def all_dgps_bounding_box(self, params: BoundingBoxParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.dgps_bounding_box, params or BoundingBoxParams(), "dgpsStations")

    def all_dgps_radius(self, params: RadiusParams) -> PageIterator[JSONObject]:
        return paginate(self.dgps_radius, params, "dgpsStations")

    def all_light_aids_bounding_box(self, params: BoundingBoxParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.light_aids_bounding_box, params or BoundingBoxParams(), "lightAids")

    def all_light_aids_radius(self, params: RadiusParams) -> PageIterator[JSONObject]:
        return paginate(self.light_aids_radius, params, "lightAids")

    def all_modus_bounding_box(self, params: BoundingBoxParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.modus_bounding_box, params or BoundingBoxParams(), "modus")

    def all_modus_radius(self, params: RadiusParams) -> PageIterator[JSONObject]:
        return paginate(self.modus_radius, params, "modus")

    def all_radio_beacons_bounding_box(self, params: BoundingBoxParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.radio_beacons_bounding_box, params or BoundingBoxParams(), "radioBeacons")

    def all_radio_beacons_radius(self, params: RadiusParams) -> PageIterator[JSONObject]:
        return paginate(self.radio_beacons_radius, params, "radioBeacons")


class NavtexService(BaseService):
    """NAVTEX maritime safety messages."""

    async def list(self, params: NavtexParams | None = None) -> JSONObject:
        return await self._get(_path("navtex"), params or NavtexParams())

    def list_all(self, params: NavtexParams | None = None) -> PageIterator[JSONObject]:
        return paginate(self.list, params or NavtexParams(), "navtexMessages")
