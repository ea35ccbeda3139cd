"""
Constants and default values for model conversions.

This module centralizes the default values used when converting API
responses to models.
"""

EMPTY_STRING = ""
