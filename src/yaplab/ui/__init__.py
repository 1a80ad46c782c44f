"""
UI Package for YapLab Client

This package provides the terminal user interface for the YapLab
client using the Textual framework.
"""

from .app import YapLabApp

__all__ = ["YapLabApp"]
