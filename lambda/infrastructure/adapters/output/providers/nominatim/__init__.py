"""Nominatim Geocoding Provider Package"""

from infrastructure.adapters.output.providers.nominatim.nominatim_geocoding_provider import NominatimGeocodingProvider

__all__ = ['NominatimGeocodingProvider']
