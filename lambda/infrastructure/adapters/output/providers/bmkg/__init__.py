"""BMKG Provider Package"""

from infrastructure.adapters.output.providers.bmkg.bmkg_provider import BmkgProvider

__all__ = ['BmkgProvider']
