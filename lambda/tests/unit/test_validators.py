"""
Testes Unitários - Validators
Parsing e validação de lat/lon vindos da query string
"""
import pytest

from domain.exceptions import InvalidCoordinatesException, MissingCoordinatesException
from shared.utils.validators import CoordinatesValidator, GenericValidator


class TestCoordinatesValidator:

    def test_valid_coordinates(self):
        coordinates = CoordinatesValidator.from_query_params("-6.2297", "106.7997")

        assert coordinates.latitude == -6.2297
        assert coordinates.longitude == 106.7997

    def test_surrounding_whitespace_is_accepted(self):
        coordinates = CoordinatesValidator.from_query_params(" -6.2 ", "106.8 ")

        assert coordinates.to_tuple() == (-6.2, 106.8)

    @pytest.mark.parametrize("lat,lon", [
        (None, "106.8"),
        ("-6.2", None),
        ("", "106.8"),
        ("   ", "106.8"),
        (None, None),
    ])
    def test_missing_parameter(self, lat, lon):
        """REGRA: ausente ou vazio → MissingCoordinatesException"""
        with pytest.raises(MissingCoordinatesException) as exc_info:
            CoordinatesValidator.from_query_params(lat, lon)

        assert exc_info.value.message == "Missing lat or lon query parameter"

    @pytest.mark.parametrize("lat,lon", [
        ("abc", "106.8"),
        ("-6.2", "east"),
        ("nan", "106.8"),
        ("-6.2", "inf"),
    ])
    def test_non_numeric(self, lat, lon):
        with pytest.raises(InvalidCoordinatesException, match="Invalid"):
            CoordinatesValidator.from_query_params(lat, lon)

    @pytest.mark.parametrize("lat,lon", [
        ("90.0001", "0"),
        ("-91", "0"),
        ("0", "180.5"),
        ("0", "-181"),
    ])
    def test_out_of_range(self, lat, lon):
        with pytest.raises(InvalidCoordinatesException) as exc_info:
            CoordinatesValidator.from_query_params(lat, lon)

        assert "min" in exc_info.value.details

    def test_boundaries_are_inclusive(self):
        coordinates = CoordinatesValidator.from_query_params("-90", "180")

        assert coordinates.to_tuple() == (-90.0, 180.0)


class TestGenericValidator:

    def test_validate_range_without_details_support(self):
        """Exceções sem `details` recebem apenas a mensagem"""
        with pytest.raises(ValueError, match="radius must be between 1 and 10"):
            GenericValidator.validate_range(11, 1, 10, "radius")

    def test_validate_float(self):
        assert GenericValidator.validate_float("1.5", "x") == 1.5

        with pytest.raises(ValueError):
            GenericValidator.validate_float("1,5", "x")
