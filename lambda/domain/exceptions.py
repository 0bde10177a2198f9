"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingCoordinatesException(DomainException):
    """Raised when lat or lon query parameter is absent"""
    pass


class InvalidCoordinatesException(DomainException):
    """Raised when lat/lon are not numeric or out of range"""
    pass


class ProviderUnavailableException(DomainException):
    """Raised when an upstream weather provider fails (network, non-2xx, malformed body)"""
    pass


class GeocodingUnavailableException(DomainException):
    """Raised when the reverse-geocoding provider fails"""
    pass


class SourceUnavailableException(DomainException):
    """Raised when the administrative reference dataset cannot be fetched or parsed"""
    pass


class CodeNotResolvableException(DomainException):
    """Raised when no administrative tier yields a match"""
    pass


class ProvinceNotFoundException(CodeNotResolvableException):
    """Province fragment has no six-zero-suffixed row"""
    pass


class RegencyNotFoundException(CodeNotResolvableException):
    """Regency/city fragment has no row under the resolved province"""
    pass


class DistrictNotFoundException(CodeNotResolvableException):
    """District fragment has no row under the resolved regency"""
    pass


class VillageNotFoundException(CodeNotResolvableException):
    """Village fragment has no row under the resolved district"""
    pass
