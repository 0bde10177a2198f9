"""Tomorrow.io Provider Package"""

from infrastructure.adapters.output.providers.tomorrow.tomorrow_provider import TomorrowProvider

__all__ = ['TomorrowProvider']
