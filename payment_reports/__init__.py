"""
Payment Reports API

Generates configurable payment report PDFs over HTTP.
"""

__version__ = "1.0.0"
