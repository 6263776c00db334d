"""Supabase adapters - Auth session and edge-function implementations."""

from .profile import SupabaseProfileService
from .session import SupabaseSessionProvider

__all__ = ["SupabaseProfileService", "SupabaseSessionProvider"]
