"""Price Watch.

Daily price tracking for product pages: fetch, extract, compare, notify.
"""

__version__ = "0.1.0"
