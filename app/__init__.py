"""
Hotel room service.

FastAPI application exposing room management and availability over REST.
"""

__version__ = "1.0.0"
