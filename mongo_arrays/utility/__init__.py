"""
Utility functions and objects used across mongo_arrays.
"""

from .logger import logger

__all__ = ["logger"]
