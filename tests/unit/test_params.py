"""Tests for endpoint parameter serialization."""

import dataclasses
from datetime import UTC, datetime

import pytest

from vesselapi.params import (
    BoundingBoxParams,
    IdType,
    PageParams,
    PortEventsByPortsParams,
    RadiusParams,
    SearchByNameParams,
    VesselPageParams,
    VesselParams,
    VesselPositionsParams,
)


@pytest.mark.unit
def test_unset_fields_are_not_sent():
    assert PageParams().to_query() == {}


@pytest.mark.unit
def test_pagination_names():
    params = PageParams(pagination_limit=50, pagination_next_token="abc")

    assert params.to_query() == {"pagination.limit": "50", "pagination.nextToken": "abc"}


@pytest.mark.unit
def test_vessel_id_type_defaults_to_imo():
    assert VesselParams().to_query() == {"filter.idType": "imo"}
    assert VesselParams(filter_id_type=IdType.MMSI).to_query() == {"filter.idType": "mmsi"}


@pytest.mark.unit
def test_combined_vessel_and_page_params():
    params = VesselPageParams(filter_id_type=IdType.MMSI, pagination_limit=10)

    assert params.to_query() == {"filter.idType": "mmsi", "pagination.limit": "10"}


@pytest.mark.unit
def test_datetime_values_use_iso_format():
    params = PortEventsByPortsParams(
        filter_port_name="Rotterdam",
        time_from=datetime(2024, 1, 1, tzinfo=UTC),
        time_to="2024-02-01T00:00:00Z",
    )

    assert params.to_query() == {
        "filter.portName": "Rotterdam",
        "time.from": "2024-01-01T00:00:00+00:00",
        "time.to": "2024-02-01T00:00:00Z",
    }


@pytest.mark.unit
def test_numeric_filters():
    params = BoundingBoxParams(filter_lon_left=3.5, filter_lon_right=4.5, filter_lat_bottom=51.0, filter_lat_top=52)

    assert params.to_query() == {
        "filter.lonLeft": "3.5",
        "filter.lonRight": "4.5",
        "filter.latBottom": "51.0",
        "filter.latTop": "52",
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    "params_class", [VesselPositionsParams, PortEventsByPortsParams, SearchByNameParams, RadiusParams]
)
def test_required_filters(params_class):
    with pytest.raises(TypeError):
        params_class()


@pytest.mark.unit
def test_params_are_immutable():
    params = RadiusParams(filter_radius=1000, filter_longitude=4.4, filter_latitude=51.9)

    with pytest.raises(dataclasses.FrozenInstanceError):
        params.filter_radius = 5

    assert dataclasses.replace(params, pagination_next_token="t1").filter_radius == 1000
