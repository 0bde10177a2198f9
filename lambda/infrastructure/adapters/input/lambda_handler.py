"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import asyncio
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.use_cases.get_aggregated_weather_use_case import GetAggregatedWeatherUseCase

# Domain Layer - Exceptions
from domain.exceptions import (
    MissingCoordinatesException,
    InvalidCoordinatesException,
    ProviderUnavailableException,
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.providers.weather_provider_factory import get_weather_provider_factory

# Shared Layer - Utilities
from shared.config.settings import get_settings
from shared.utils.validators import CoordinatesValidator
from shared.config.logger_config import get_logger

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

# Configuração imutável, lida uma vez por container
settings = get_settings()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=settings.cors_origin))

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(MissingCoordinatesException)(exception_service.handle_missing_coordinates)
app.exception_handler(InvalidCoordinatesException)(exception_service.handle_invalid_coordinates)
app.exception_handler(ProviderUnavailableException)(exception_service.handle_provider_unavailable)
app.not_found(exception_service.handle_not_found)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/weather")
def get_weather_route():
    """
    GET /weather?lat=-6.2297&lon=106.7997

    Returns merged weather from all providers:
    { openWeather, tomorrowWeather, accuWeather, bmkgWeather }

    A failed provider yields an error marker under its own key only.
    BMKG depends on resolving the coordinates to an ADM4 code first.
    """
    lat = app.current_event.get_query_string_value(name="lat", default_value=None)
    lon = app.current_event.get_query_string_value(name="lon", default_value=None)

    # Validate coordinates (throws MissingCoordinatesException / InvalidCoordinatesException)
    coordinates = CoordinatesValidator.from_query_params(lat, lon)

    factory = get_weather_provider_factory(settings)

    async def execute_async():
        use_case = GetAggregatedWeatherUseCase(
            weather_providers=factory.get_direct_providers(),
            administrative_code_provider=factory.get_administrative_code_provider(),
            code_resolver=factory.get_code_resolver(),
            timeout_seconds=settings.provider_timeout_seconds
        )
        return await use_case.execute(coordinates)

    # Run async code with persistent loop
    aggregated = run_async(execute_async())

    return aggregated.to_api_response()


# =============================
# Lambda Handler (100% ASYNC)
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Available routes:
    - GET /weather?lat=<lat>&lon=<lon>
    """
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Lambda request received",
        route=event.get('path', 'N/A'),
        method=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        session_id=headers.get('x-session-id', 'N/A')
    )

    response = app.resolve(event, context)

    # Add CORS headers manually
    if 'headers' not in response:
        response['headers'] = {}

    response['headers']['Access-Control-Allow-Origin'] = settings.cors_origin
    response['headers']['Access-Control-Allow-Headers'] = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With,X-Session-Id'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,OPTIONS'
    response['headers']['Access-Control-Max-Age'] = '86400'

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Lambda request completed",
        status_code=status_code,
        success=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Reutiliza o loop entre invocações Lambda (warm starts) para que a
    sessão aiohttp compartilhada permaneça válida.
    """
    global _global_event_loop

    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)

    Args:
        coro: Coroutine a ser executada

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
