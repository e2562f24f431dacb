"""Catalog Console API.

Back-office service for composing marketplace categories out of
service tabs, service items and references to existing products.
"""

__version__ = "0.1.0"
