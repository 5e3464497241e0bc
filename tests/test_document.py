"""
Tests for the DWML document registries and parameter enumeration.
"""

import pytest

from src.dwml_extract.core.exceptions import DWMLParseError, StructuralError
from src.dwml_extract.dwml import (
    DWMLDocument,
    DWMLIconSeriesParameter,
    DWMLNumericSeriesParameter,
)
from src.dwml_extract.reader import load_document, parse_xml


class TestDocumentConstruction:
    """Test document construction."""

    def test_missing_data_element(self):
        with pytest.raises(StructuralError, match="Missing data element"):
            DWMLDocument(parse_xml("<dwml><head/></dwml>"))

    def test_root_data_element(self):
        doc = DWMLDocument(parse_xml("<data><location><location-key>a</location-key></location></data>"))

        assert list(doc.locations) == ["a"]

    def test_first_data_element_is_used(self):
        doc = DWMLDocument(parse_xml(
            "<dwml>"
            "<data><location><location-key>first</location-key></location></data>"
            "<data><location><location-key>second</location-key></location></data>"
            "</dwml>"
        ))

        assert list(doc.locations) == ["first"]

    def test_accepts_element_tree(self, sample_path):
        from lxml import etree

        doc = DWMLDocument(etree.parse(str(sample_path)))

        assert "point1" in doc.locations

    def test_from_string_and_from_file(self, sample_path):
        from_string = DWMLDocument.from_string(sample_path.read_text(encoding="utf-8"))
        from_file = DWMLDocument.from_file(sample_path)
        loaded = load_document(sample_path)

        assert len(from_string.parameters) == len(from_file.parameters) == len(loaded.parameters)

    def test_invalid_xml(self):
        with pytest.raises(DWMLParseError):
            DWMLDocument.from_string("<dwml><data></dwml>")

    def test_str_input_ignores_declared_encoding(self):
        """Decoded text keeps its characters whatever the declaration says."""
        doc = DWMLDocument.from_string(
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            "<dwml><data><parameters><temperature><name>Température</name>"
            "<value>1</value></temperature></parameters></data></dwml>"
        )

        assert doc.parameters[0].name == "Température"

    def test_bytes_input_uses_declared_encoding(self):
        raw = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            "<dwml><data><parameters><temperature><name>Température</name>"
            "</temperature></parameters></data></dwml>"
        ).encode("iso-8859-1")

        assert DWMLDocument(parse_xml(raw)).parameters[0].name == "Température"

    def test_default_namespace(self):
        doc = DWMLDocument.from_string(
            '<dwml xmlns="urn:example:dwml"><data>'
            "<location><location-key>point1</location-key>"
            '<point latitude="38.99" longitude="-77.01"/></location>'
            '<time-layout time-coordinate="local"><layout-key>k-p24h-n1-1</layout-key>'
            "<start-valid-time>2024-01-15T07:00:00-05:00</start-valid-time></time-layout>"
            '<parameters applicable-location="point1">'
            '<temperature type="maximum" time-layout="k-p24h-n1-1">'
            "<name>Daily Maximum Temperature</name><value>72.5</value></temperature>"
            "</parameters></data></dwml>"
        )
        parameter = doc.parameters[0]

        assert parameter.element_name == "temperature"
        assert parameter.name == "Daily Maximum Temperature"
        assert parameter.location.point.latitude == 38.99
        assert parameter.time_layout.parsed_key.period == "p24h"
        assert [entry.value for entry in parameter.series] == [72.5]


class TestRegistries:
    """Test location and time layout registries."""

    def test_duplicate_location_keys_last_wins(self, make_document):
        doc = make_document(
            '<location><location-key>dup</location-key><point latitude="1" longitude="1"/></location>'
            '<location><location-key>dup</location-key><point latitude="2" longitude="2"/></location>'
        )

        assert len(doc.locations) == 1
        assert doc.locations["dup"].point.latitude == 2.0

    def test_duplicate_time_layout_keys_last_wins(self, make_document):
        doc = make_document(
            '<time-layout time-coordinate="local"><layout-key>k-p1h-n1-1</layout-key></time-layout>'
            '<time-layout time-coordinate="UTC"><layout-key>k-p1h-n1-1</layout-key></time-layout>'
        )

        assert len(doc.time_layouts) == 1
        assert doc.time_layouts["k-p1h-n1-1"].time_coordinate == "UTC"

    def test_keyless_entries_not_registered(self, make_document):
        doc = make_document(
            '<location><point latitude="1" longitude="1"/></location>'
            "<time-layout/>"
        )

        assert doc.locations == {}
        assert doc.time_layouts == {}

    def test_lookups_are_idempotent(self, sample_document):
        first = sample_document.locations
        second = sample_document.locations

        assert first is second
        assert set(first) == set(second)
        assert first["point1"].point == second["point1"].point
        assert (
            sample_document.time_layouts["k-p3h-n4-3"].valid_times
            == sample_document.time_layouts["k-p3h-n4-3"].valid_times
        )

    def test_sample_registries(self, sample_document):
        assert set(sample_document.locations) == {"point1"}
        assert set(sample_document.time_layouts) == {"k-p24h-n2-1", "k-p12h-n3-2", "k-p3h-n4-3"}


class TestParameters:
    """Test parameter enumeration."""

    def test_sample_parameters_in_document_order(self, sample_document):
        names = [parameter.element_name for parameter in sample_document.parameters]

        assert names == [
            "temperature",
            "probability-of-precipitation",
            "conditions-icon",
            "wind-speed",
        ]

    def test_variant_dispatch(self, sample_document):
        parameters = sample_document.parameters

        assert isinstance(parameters[0], DWMLNumericSeriesParameter)
        assert isinstance(parameters[1], DWMLNumericSeriesParameter)
        assert isinstance(parameters[2], DWMLIconSeriesParameter)

    def test_unmapped_elements_are_skipped(self, make_document):
        doc = make_document(
            "<parameters>"
            '<hazards time-layout="k"><hazard-conditions/></hazards>'
            "<hazard-conditions/>"
            "</parameters>"
        )

        assert doc.parameters == []

    def test_only_direct_children_are_considered(self, make_document):
        doc = make_document(
            "<parameters><wrapper><temperature><value>1</value></temperature></wrapper></parameters>"
        )

        assert doc.parameters == []

    def test_parameters_are_memoized(self, sample_document):
        assert sample_document.parameters is sample_document.parameters

    def test_unresolved_time_layout_in_sample(self, sample_document):
        wind = sample_document.parameters[3]

        assert wind.time_layout_key == "k-p99h-n1-9"
        assert wind.time_layout is None
        assert wind.location is sample_document.locations["point1"]
        assert wind.series == []

    def test_multiple_parameter_blocks(self, make_document):
        doc = make_document(
            "<location><location-key>a</location-key></location>"
            "<location><location-key>b</location-key></location>"
            '<parameters applicable-location="a"><temperature/></parameters>'
            '<parameters applicable-location="b"><humidity/><conditions-icon/></parameters>'
        )

        assert [p.location_key for p in doc.parameters] == ["a", "b", "b"]
        assert doc.parameters[2].location is doc.locations["b"]

    def test_custom_element_map(self):
        doc = DWMLDocument(
            parse_xml("<dwml><data><parameters><temperature/><dew-point/></parameters></data></dwml>"),
            element_map={"dew-point": DWMLNumericSeriesParameter},
        )

        assert [p.element_name for p in doc.parameters] == ["dew-point"]


class TestOutputContract:
    """Test the consumer-facing dictionaries."""

    def test_numeric_parameter_to_dict(self, sample_document):
        data = sample_document.parameters[0].to_dict()

        assert data["element_name"] == "temperature"
        assert data["name"] == "Daily Maximum Temperature"
        assert data["type"] == "maximum"
        assert data["units"] == "Fahrenheit"
        assert data["time_layout"] == {"period": "p24h", "times": "n2", "seq": 1}
        assert data["point"] == {"latitude": 38.99, "longitude": -77.01}
        assert [entry["value"] for entry in data["series"]] == [72.5, 68.0]
        assert data["series"][0]["time"]["start_raw"] == "2024-01-15T07:00:00-05:00"

    def test_icon_parameter_to_dict(self, sample_document):
        data = sample_document.parameters[2].to_dict()

        assert "units" not in data
        assert len(data["series"]) == 3
        assert data["series"][0]["url"].endswith("sct.jpg")
        assert "end" not in data["series"][0]["time"]

    def test_unresolved_references_to_dict(self, sample_document):
        data = sample_document.parameters[3].to_dict()

        assert data["time_layout"] is None
        assert data["series"] == []

    def test_unparsable_numbers_become_none(self, make_document):
        doc = make_document(
            '<location><location-key>a</location-key><point latitude="x" longitude="1"/></location>'
            '<time-layout><layout-key>k-p1h-n1-1</layout-key>'
            "<start-valid-time>2024-01-15T07:00:00Z</start-valid-time></time-layout>"
            '<parameters applicable-location="a"><temperature time-layout="k-p1h-n1-1">'
            "<value>n/a</value></temperature></parameters>"
        )
        data = doc.parameters[0].to_dict()

        assert data["point"] == {"latitude": None, "longitude": 1.0}
        assert data["series"][0]["value"] is None

    def test_document_to_dict(self, sample_document):
        assert len(sample_document.to_dict()["parameters"]) == 4
