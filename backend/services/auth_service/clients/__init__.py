"""
Identity provider clients for the authentication service.
"""

from .supabase_auth import SupabaseAuthProvider

__all__ = ["SupabaseAuthProvider"]
