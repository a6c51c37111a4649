"""
Common security utilities for authentication.
"""

from .auth import get_optional_bearer_token

__all__ = ["get_optional_bearer_token"]
