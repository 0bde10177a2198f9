"""Async Use Case: Resolve coordenadas em código administrativo ADM4"""
import asyncio

from ddtrace import tracer

from application.ports.input.resolve_administrative_code_port import IResolveAdministrativeCodeUseCase
from application.ports.output.geocoding_provider_port import IReverseGeocodingProvider
from application.ports.output.reference_dataset_port import IReferenceDatasetLoader
from domain.services.administrative_code_matcher import AdministrativeCodeMatcher
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ResolveAdministrativeCodeUseCase(IResolveAdministrativeCodeUseCase):
    """
    Reverse geocoding + tabela de referência → código do village

    Geocoding e download do dataset são independentes e rodam em paralelo.
    O dataset é carregado a cada resolução (sem cache entre requisições).
    """

    def __init__(
        self,
        geocoding_provider: IReverseGeocodingProvider,
        reference_loader: IReferenceDatasetLoader
    ):
        self.geocoding_provider = geocoding_provider
        self.reference_loader = reference_loader

    @tracer.wrap(resource="use_case.resolve_administrative_code")
    async def execute(self, coordinates: Coordinates) -> str:
        fragments, rows = await asyncio.gather(
            self.geocoding_provider.reverse(coordinates),
            self.reference_loader.load(),
            return_exceptions=True
        )

        # Geocoding tem precedência no erro reportado (inclui CancelledError)
        if isinstance(fragments, BaseException):
            raise fragments
        if isinstance(rows, BaseException):
            raise rows

        logger.info(
            "Address fragments resolved",
            coordinates=str(coordinates),
            **fragments.to_dict()
        )

        code = AdministrativeCodeMatcher.match(fragments, rows)

        logger.info("ADM4 code resolved", coordinates=str(coordinates), adm4=code)
        return code
