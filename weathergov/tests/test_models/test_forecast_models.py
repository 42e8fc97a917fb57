"""Tests for forecast, gridpoint and point response models."""

import pytest
from pydantic import ValidationError

from weathergov.models.forecast import (
    Forecast,
    ForecastPeriod,
    HourlyForecast,
    HourlyForecastPeriod,
)
from weathergov.models.gridpoint import GridpointForecast
from weathergov.models.points import PointMetadata


class TestHourlyForecastPeriod:
    def test_shared_fields_nested(self):
        period = HourlyForecastPeriod.model_validate(
            {
                "number": 3,
                "startTime": "2026-10-17T07:00:00-05:00",
                "temperature": 46,
                "shortForecast": "Sunny",
                "dewpoint": {"unitCode": "wmoUnit:degC", "value": 4.4},
            }
        )
        assert isinstance(period.period, ForecastPeriod)
        assert period.period.number == 3
        assert period.period.short_forecast == "Sunny"
        assert period.dewpoint.value == 4.4
        assert period.relative_humidity is None

    def test_standard_period_ignores_hourly_fields(self):
        period = ForecastPeriod.model_validate(
            {"number": 1, "dewpoint": {"value": 1.0}, "relativeHumidity": {"value": 50}}
        )
        assert period.number == 1
        assert not hasattr(period, "dewpoint")

    def test_already_nested_input(self):
        period = HourlyForecastPeriod(period=ForecastPeriod(number=9))
        assert period.period.number == 9

    def test_bad_shared_field_type(self):
        with pytest.raises(ValidationError):
            HourlyForecastPeriod.model_validate({"isDaytime": "sometimes"})


class TestForecastDocuments:
    def test_missing_fields_default(self):
        forecast = Forecast.model_validate({})
        assert forecast.periods == []
        assert forecast.point is None
        assert forecast.elevation.value is None

    def test_hourly_periods_typed(self):
        forecast = HourlyForecast.model_validate({"periods": [{"number": 1}]})
        assert isinstance(forecast.periods[0], HourlyForecastPeriod)

    def test_frozen(self):
        forecast = Forecast.model_validate({"units": "us"})
        with pytest.raises(ValidationError):
            forecast.units = "si"

    def test_point_attached_by_copy(self):
        point = PointMetadata(grid_id="LOT", grid_x=74, grid_y=71)
        forecast = Forecast.model_validate({"units": "us"})
        attached = forecast.model_copy(update={"point": point})
        assert attached.point is point
        assert forecast.point is None
        assert "point" not in attached.model_dump()

    def test_periods_must_be_list(self):
        with pytest.raises(ValidationError):
            Forecast.model_validate({"periods": {"number": 1}})


class TestGridpointForecast:
    def test_irregular_aliases(self):
        grid = GridpointForecast.model_validate(
            {
                "potentialOf50mphWindGusts": {"values": [{"validTime": "t/PT1H", "value": 5}]},
                "wavePeriod2": {"uom": "s", "values": []},
                "hazards": {"values": [{"validTime": "t/PT1H", "value": [
                    {"phenomenon": "FW", "significance": "A", "event_number": 12}
                ]}]},
            }
        )
        assert grid.potential_of_50mph_wind_gusts.values[0].value == 5
        assert grid.wave_period2.uom == "s"
        assert grid.hazards.values[0].value[0].event_number == 12

    def test_unpublished_series_empty(self):
        grid = GridpointForecast.model_validate({})
        assert grid.red_flag_threat_index.values == []
        assert grid.temperature.uom == ""


class TestPointMetadata:
    def test_json_ld_keys(self):
        point = PointMetadata.model_validate(
            {"@id": "https://x/points/1,2", "gridX": 1, "gridY": 2, "timeZone": "UTC"}
        )
        assert point.id == "https://x/points/1,2"
        assert (point.grid_x, point.grid_y) == (1, 2)
        assert point.time_zone == "UTC"

    def test_feature_properties_unwrapped(self):
        point = PointMetadata.model_validate(
            {"type": "Feature", "properties": {"gridId": "SEW", "cwa": "SEW"}}
        )
        assert point.grid_id == "SEW"

    def test_equality_by_value(self):
        a = PointMetadata(grid_id="LOT", grid_x=1, grid_y=2)
        b = PointMetadata(grid_id="LOT", grid_x=1, grid_y=2)
        assert a == b


class TestNullValues:
    def test_null_values_fall_back_to_defaults(self):
        period = HourlyForecastPeriod.model_validate(
            {"number": 4, "windSpeed": None, "isDaytime": None, "dewpoint": None}
        )
        assert period.period.wind_speed == ""
        assert period.period.is_daytime is False
        assert period.dewpoint is None

    def test_required_field_still_rejects_null(self):
        with pytest.raises(ValidationError):
            HourlyForecastPeriod.model_validate({"period": None})
