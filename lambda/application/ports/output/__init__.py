"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .weather_provider_port import IWeatherProvider, IAdministrativeCodeWeatherProvider
from .geocoding_provider_port import IReverseGeocodingProvider
from .reference_dataset_port import IReferenceDatasetLoader
