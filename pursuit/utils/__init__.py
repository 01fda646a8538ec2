# pursuit/utils/__init__.py
"""Utility modules for the prediction engine."""

from .math_utils import *
from .errors import *
from . import logger

__all__ = ['math_utils', 'errors', 'logger']
