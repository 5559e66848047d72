# -*- coding: utf-8 -*-
"""
License Wizard Application Core Module
"""

from .config import Config

__all__ = ["Config"]
