#!/usr/bin/env python3
"""
Services package - High-level services for fitflow functionality
"""

from .fitness_service import FitnessTrendService

__all__ = ['FitnessTrendService']
