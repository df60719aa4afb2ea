"""
Storefront e-commerce backend.

Importing the package registers the TRACE log level used throughout.
"""
from storefront.core import logging_config  # noqa: F401

__version__ = "0.1.0"
