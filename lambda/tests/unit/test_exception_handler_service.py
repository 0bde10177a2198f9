"""
Testes para ExceptionHandlerService
Garante cobertura completa do tratamento de exceções
"""
import json
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from domain.exceptions import (
    MissingCoordinatesException,
    InvalidCoordinatesException,
    ProviderUnavailableException,
)


class TestExceptionHandlerService:
    """Testes para o serviço de tratamento de exceções"""

    def test_handle_missing_coordinates(self):
        """REGRA: lat/lon ausente deve retornar 400 com mensagem fixa"""
        ex = MissingCoordinatesException(
            "Missing lat or lon query parameter",
            details={"lat": None, "lon": "106.8"}
        )
        response = ExceptionHandlerService.handle_missing_coordinates(ex)

        assert response.status_code == 400
        assert response.content_type == "application/json"

        body = json.loads(response.body)
        assert body["type"] == "MissingCoordinatesException"
        assert body["error"] == "Missing lat or lon query parameter"
        assert body["details"] == {"lat": None, "lon": "106.8"}

    def test_handle_invalid_coordinates(self):
        """REGRA: coordenadas fora do range devem retornar 400"""
        ex = InvalidCoordinatesException(
            "lat must be between -90.0 and 90.0",
            details={"lat": 91.0, "min": -90.0, "max": 90.0}
        )
        response = ExceptionHandlerService.handle_invalid_coordinates(ex)

        assert response.status_code == 400

        body = json.loads(response.body)
        assert body["type"] == "InvalidCoordinatesException"
        assert body["error"] == "Invalid coordinates"
        assert body["details"]["lat"] == 91.0

    def test_handle_provider_unavailable(self):
        """REGRA: todos os provedores falharam deve retornar 502"""
        ex = ProviderUnavailableException(
            "All weather providers failed",
            details={"providers": {"openWeather": {"error": "Failed to fetch OpenWeather data"}}}
        )
        response = ExceptionHandlerService.handle_provider_unavailable(ex)

        assert response.status_code == 502

        body = json.loads(response.body)
        assert body["type"] == "ProviderUnavailableException"
        assert body["message"] == "All weather providers failed"
        assert "openWeather" in body["details"]["providers"]

    def test_handle_value_error(self):
        response = ExceptionHandlerService.handle_value_error(ValueError("bad input"))

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["type"] == "ValidationError"
        assert body["message"] == "bad input"

    def test_handle_unexpected_error_hides_internals(self):
        """REGRA: erro inesperado retorna 500 sem vazar a mensagem original"""
        response = ExceptionHandlerService.handle_unexpected_error(RuntimeError("secret stack detail"))

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error"] == "Internal server error"
        assert "secret" not in response.body

    def test_handle_not_found(self):
        response = ExceptionHandlerService.handle_not_found(Exception("Not found"))

        assert response.status_code == 404
        body = json.loads(response.body)
        assert body["type"] == "NotFoundError"
        assert "/weather" in body["message"]
