"""Schema name derivation tests."""

from __future__ import annotations

import pytest
from openapi_specfmt.schema_naming import (
    ResponseSite,
    derive_name_from_path_and_method,
    derive_response_name,
    derive_schema_name,
    to_pascal_case,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("airport", "Airport"),
        ("airport_info", "AirportInfo"),
        ("flight-track", "FlightTrack"),
        ("airport_ID-list", "AirportIDList"),
        ("airport__info_", "AirportInfo"),
        ("", ""),
        ("_-_", ""),
        ("élan_vital", "ÉlanVital"),
        ("straße_ßign", "Straßeßign"),
    ],
)
def test_to_pascal_case(text: str, expected: str) -> None:
    assert to_pascal_case(text) == expected


@pytest.mark.parametrize(
    ("operation_id", "expected"),
    [
        ("get_airport", "Airport"),
        ("get_operator", "Operator"),
        ("get_airport_info", "AirportInfo"),
        ("post_user_data", "UserData"),
        ("list_flights", "Flights"),
        ("GET_airport", "Airport"),
        ("remove_flight-alert", "FlightAlert"),
        ("search_flights", "SearchFlights"),
        ("", ""),
        ("get_", ""),
    ],
)
def test_derive_schema_name_strips_one_verb_prefix(operation_id: str, expected: str) -> None:
    assert derive_schema_name(operation_id) == expected


def test_only_the_first_matching_prefix_is_stripped() -> None:
    assert derive_schema_name("list_get_flights") == "GetFlights"
    assert derive_schema_name("get_list_flights") == "ListFlights"


def test_camel_case_operation_id_keeps_its_verb() -> None:
    # Prefixes only match in their `verb_` form, so camelCase ids are not stripped.
    assert derive_schema_name("getAirport") == "GetAirport"
    assert derive_schema_name("get") == "Get"


def test_path_and_method_fallback() -> None:
    assert derive_name_from_path_and_method("/flights/{id}/track", "get") == "FlightsIdTrackGet"
    assert (
        derive_name_from_path_and_method("/flight-plans/{flight_id}", "POST")
        == "FlightPlansFlightIdPost"
    )
    assert derive_name_from_path_and_method("/", "delete") == "Delete"


def test_response_name_uses_operation_id_and_status() -> None:
    assert derive_response_name("/airports/{id}", "get", "get_airport", "200") == (
        "Airport200Response"
    )
    assert derive_response_name("/airports/{id}", "get", "get_airport", "default") == (
        "AirportDefaultResponse"
    )


def test_response_name_falls_back_to_path_without_operation_id() -> None:
    assert derive_response_name("/flights/{id}/track", "get", "", "200") == (
        "FlightsIdTrackGet200Response"
    )


def test_response_name_falls_back_to_path_when_stripping_empties_operation_id() -> None:
    assert derive_response_name("/airports", "get", "get_", "404") == "AirportsGet404Response"


def test_response_name_defaults_for_empty_context() -> None:
    assert derive_response_name("", "", "", "") == "ResponseDefaultResponse"


def test_response_site_response_name() -> None:
    site = ResponseSite(path="/operators/{id}", method="get", operation_id="", status="2XX")

    assert site.response_name() == "OperatorsIdGet2XXResponse"
