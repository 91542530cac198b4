"""
helpkit: small, pure helpers for collections, rounding, locale lookup and objects.
"""

__version__ = "0.1.0"
