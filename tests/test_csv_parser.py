from __future__ import annotations

from pathlib import Path

import pytest

from route_planner.core import LocationRecord, ParseError, RoutePlannerError
from route_planner.services import CSVIngestor, parse_locations


def test_parse_full_record():
    locations = parse_locations("-6.1751,106.8650,Toyib Travel,Jl. Tole Iskandar No.9")

    assert locations == [
        LocationRecord(
            latitude=-6.1751,
            longitude=106.8650,
            name="Toyib Travel",
            address="Jl. Tole Iskandar No.9",
        )
    ]


def test_parse_coordinates_only_leaves_optional_fields_unset():
    (location,) = parse_locations("-6.1751,106.8650")

    assert location.latitude == -6.1751
    assert location.longitude == 106.8650
    assert location.name is None
    assert location.address is None


def test_parse_keeps_provided_empty_fields():
    (location,) = parse_locations("1,2,,")

    assert location.name == ""
    assert location.address == ""


def test_parse_trims_fields_and_handles_crlf():
    locations = parse_locations("  -6.2382 , 106.8255 , Blok M \r\n-6.1935,106.8228\r\n")

    assert [(loc.latitude, loc.longitude) for loc in locations] == [(-6.2382, 106.8255), (-6.1935, 106.8228)]
    assert locations[0].name == "Blok M"


def test_parse_ignores_extra_columns():
    (location,) = parse_locations("1,2,Name,Address,extra,columns")
    assert location.address == "Address"


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " \r\n "])
def test_parse_empty_input_yields_no_records(text):
    assert parse_locations(text) == []


@pytest.mark.parametrize(
    "text",
    ["abc,106.8650", "-6.1751", "-6.1751,", "nan,106.8650", ",106.8650", "inf,0", "1_0,2", "0x1,2", "12abc,1", "6.1 ,1 0"],
)
def test_parse_rejects_non_numeric_values(text):
    with pytest.raises(ParseError) as excinfo:
        parse_locations(text)
    assert excinfo.value.reason == "invalid coordinate values"
    assert "invalid coordinate values" in str(excinfo.value)


@pytest.mark.parametrize("text", ["91,106.8650", "-91,0", "0,181", "0,-180.5", "1e3,0", "1e400,0"])
def test_parse_rejects_out_of_range_values(text):
    with pytest.raises(ParseError) as excinfo:
        parse_locations(text)
    assert excinfo.value.reason == "coordinate out of range"


def test_parse_is_all_or_nothing_and_reports_line():
    with pytest.raises(ParseError) as excinfo:
        parse_locations("-6.1751,106.8650\n-6.2382,east\n-6.1935,106.8228")

    error = excinfo.value
    assert error.line_number == 2
    assert error.details == {"line": 2, "content": "-6.2382,east"}
    assert str(error) == "Failed to parse CSV: invalid coordinate values (line 2)"


def test_parse_rejects_blank_line_between_records():
    with pytest.raises(ParseError):
        parse_locations("1,2\n\n3,4")


def test_ingestor_loads_file_with_bom(tmp_path: Path):
    csv_path = tmp_path / "destinations.csv"
    csv_path.write_text("-6.1751,106.8650,Monas\n-6.2382,106.8255\n", encoding="utf-8-sig")

    locations = CSVIngestor().load(csv_path)

    assert [location.name for location in locations] == ["Monas", None]
    assert locations[0].latitude == -6.1751


def test_ingestor_detects_encoding(tmp_path: Path):
    csv_path = tmp_path / "destinations.csv"
    csv_path.write_bytes("-6.1751,106.8650,Kafé Ñusantara\n".encode("latin-1"))

    (location,) = CSVIngestor(encoding="auto").load(csv_path)

    assert location.latitude == -6.1751
    assert location.name is not None


def test_ingestor_rejects_missing_file(tmp_path: Path):
    with pytest.raises(RoutePlannerError, match="not found"):
        CSVIngestor().load(tmp_path / "missing.csv")


def test_ingestor_enforces_size_limit(tmp_path: Path):
    csv_path = tmp_path / "destinations.csv"
    csv_path.write_text("1,2\n" * 10)

    with pytest.raises(RoutePlannerError) as excinfo:
        CSVIngestor(max_bytes=8).load(csv_path)
    assert excinfo.value.details["limit"] == 8


def test_ingestor_propagates_parse_errors(tmp_path: Path):
    csv_path = tmp_path / "destinations.csv"
    csv_path.write_text("91,106.8650\n")

    with pytest.raises(ParseError):
        CSVIngestor().load(csv_path)


@pytest.mark.parametrize(
    "text, expected",
    [("+1.5,-2", (1.5, -2.0)), (".5,5.", (0.5, 5.0)), ("1e1,-1.5E+1", (10.0, -15.0)), ("-0,0", (0.0, 0.0))],
)
def test_parse_accepts_plain_decimal_forms(text, expected):
    (location,) = parse_locations(text)
    assert (location.latitude, location.longitude) == expected
