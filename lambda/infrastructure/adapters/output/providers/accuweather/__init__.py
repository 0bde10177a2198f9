"""AccuWeather Provider Package"""

from infrastructure.adapters.output.providers.accuweather.accuweather_provider import AccuWeatherProvider

__all__ = ['AccuWeatherProvider']
