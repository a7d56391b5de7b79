"""
Exposes the version of egm96
"""

__version__ = 'v0.1.0'

__all__ = ["__version__"]
