"""
skyhop
------
Gap-jumping arcade game built around a fixed-step simulation engine.
"""

__version__ = "1.0.0"
