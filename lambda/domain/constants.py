"""
Domain Constants - Todas as constantes da aplicação centralizadas
URLs de provedores, limites HTTP e convenções de código administrativo
"""


class API:
    """Constantes de APIs externas"""

    OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
    TOMORROW_TIMELINES_URL = "https://api.tomorrow.io/v4/timelines"
    ACCUWEATHER_BASE_URL = "https://dataservice.accuweather.com"
    BMKG_FORECAST_URL = "https://api.bmkg.go.id/publik/prakiraan-cuaca"
    NOMINATIM_REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"
    KODEWILAYAH_CSV_URL = (
        "https://raw.githubusercontent.com/kodewilayah/permendagri-72-2019/main/dist/base.csv"
    )

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 15  # segundos (CSV de referência tem ~83k linhas)
    HTTP_TIMEOUT_CONNECT = 5  # segundos
    HTTP_TIMEOUT_READ = 10  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos

    # Retry para rate limiting / indisponibilidade temporária
    RETRY_ATTEMPTS = 3
    RETRY_STATUSES = (429, 503)
    RETRY_BACKOFF_MULTIPLIER = 1
    RETRY_BACKOFF_MAX = 4  # segundos

    UNITS_METRIC = "metric"


class Geocoding:
    """Parâmetros do reverse geocoding (Nominatim)"""

    ZOOM = 18
    FORMAT = "json"
    DEFAULT_USER_AGENT = "bmkg-weather-aggregator"

    # Prioridade de campos por nível (schema varia com a densidade do local)
    PROVINCE_FIELDS = ("state",)
    REGENCY_FIELDS = ("city", "county")
    DISTRICT_FIELDS = ("suburb", "city_district")
    VILLAGE_FIELDS = ("village", "neighbourhood")


class AdministrativeCodeFormat:
    """Convenção de código hierárquico de largura fixa (Kemendagri)"""

    PROVINCE_SUFFIX = "000000"
    REGENCY_SUFFIX = "0000"
    DISTRICT_SUFFIX = "00"

    PROVINCE_PREFIX_LENGTH = 2
    REGENCY_PREFIX_LENGTH = 4
    DISTRICT_PREFIX_LENGTH = 6

    DOTTED_SEPARATOR = "."


class ResponseKeys:
    """Chaves da resposta agregada"""

    OPENWEATHER = "openWeather"
    TOMORROW = "tomorrowWeather"
    ACCUWEATHER = "accuWeather"
    BMKG = "bmkgWeather"
