"""
Initialize the mongo_arrays package.
"""

__all__ = ["data_model", "store", "utility", "errors", "run", "DemoConfig"]

from . import data_model, errors, store, utility
from .config import DemoConfig
from .runner import run
