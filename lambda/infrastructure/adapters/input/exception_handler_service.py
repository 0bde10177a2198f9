"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from aws_lambda_powertools.event_handler import Response

from domain.exceptions import (
    MissingCoordinatesException,
    InvalidCoordinatesException,
    ProviderUnavailableException,
)
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def handle_missing_coordinates(ex: MissingCoordinatesException) -> Response:
        """Handle 400 - lat/lon query parameter missing"""
        ExceptionHandlerService.logger.warning("Missing coordinates", error=str(ex), details=ex.details)
        return Response(
            status_code=400,
            content_type="application/json",
            body=json.dumps({
                "type": "MissingCoordinatesException",
                "error": "Missing lat or lon query parameter",
                "message": str(ex),
                "details": ex.details
            })
        )

    @staticmethod
    def handle_invalid_coordinates(ex: InvalidCoordinatesException) -> Response:
        """Handle 400 - lat/lon not numeric or out of range"""
        ExceptionHandlerService.logger.warning("Invalid coordinates", error=str(ex), details=ex.details)
        return Response(
            status_code=400,
            content_type="application/json",
            body=json.dumps({
                "type": "InvalidCoordinatesException",
                "error": "Invalid coordinates",
                "message": str(ex),
                "details": ex.details
            })
        )

    @staticmethod
    def handle_provider_unavailable(ex: ProviderUnavailableException) -> Response:
        """Handle 502 - Every upstream weather provider failed"""
        ExceptionHandlerService.logger.error("Weather providers unavailable", error=str(ex), details=ex.details)
        return Response(
            status_code=502,
            content_type="application/json",
            body=json.dumps({
                "type": "ProviderUnavailableException",
                "error": "Weather providers unavailable",
                "message": str(ex),
                "details": ex.details
            })
        )

    @staticmethod
    def handle_not_found(ex: Exception) -> Response:
        """Handle 404 - Route not found"""
        ExceptionHandlerService.logger.warning("Route not found", error=str(ex))
        return Response(
            status_code=404,
            content_type="application/json",
            body=json.dumps({
                "type": "NotFoundError",
                "error": "Not found",
                "message": "Available route: GET /weather?lat=<lat>&lon=<lon>"
            })
        )

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return Response(
            status_code=400,
            content_type="application/json",
            body=json.dumps({
                "type": "ValidationError",
                "error": "Validation error",
                "message": str(ex)
            })
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return Response(
            status_code=500,
            content_type="application/json",
            body=json.dumps({
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            })
        )
