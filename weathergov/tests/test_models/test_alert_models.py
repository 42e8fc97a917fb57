"""Tests for alert, observation and office models."""

from weathergov.models.alert import Alert, AlertCollection
from weathergov.models.observation import Observation
from weathergov.models.office import Office


class TestAlertCollection:
    def test_graph_absent_is_none(self):
        assert AlertCollection.model_validate_json(b"{}").graph is None

    def test_graph_empty(self):
        assert AlertCollection.model_validate_json(b'{"@graph": []}').graph == []

    def test_alert_fields(self):
        alert = Alert.model_validate(
            {"@id": "a1", "senderName": "NWS Chicago IL", "severity": "Severe"}
        )
        assert alert.id == "a1"
        assert alert.sender_name == "NWS Chicago IL"
        assert alert.expires is None


class TestObservation:
    def test_null_values(self):
        obs = Observation.model_validate(
            {"timestamp": None, "temperature": {"value": None, "unitCode": "wmoUnit:degC"}}
        )
        assert obs.timestamp is None
        assert obs.temperature.value is None
        assert obs.temperature.unit_code == "wmoUnit:degC"
        assert obs.cloud_layers == []


class TestOffice:
    def test_defaults(self):
        office = Office.model_validate({"id": "SEW"})
        assert office.id == "SEW"
        assert office.address.postal_code == ""
        assert office.responsible_counties == []


class TestNullValues:
    def test_observation_nulls_use_defaults(self):
        obs = Observation.model_validate(
            {"station": None, "rawMessage": None, "presentWeather": None, "elevation": None}
        )
        assert obs.station == ""
        assert obs.raw_message == ""
        assert obs.present_weather == []
        assert obs.elevation.value is None

    def test_optional_fields_stay_none(self):
        alert = Alert.model_validate({"@id": None, "instruction": None})
        assert alert.id == ""
        assert alert.instruction is None
