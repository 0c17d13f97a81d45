"""
Exposes the version of geodist
"""

__version__ = 'v1.0.0'

__all__ = ['__version__']
