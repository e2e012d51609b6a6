# -*- coding: utf-8 -*-
"""
Template Studio Application Core Module
"""

from .config import Config

__all__ = ["Config"]
