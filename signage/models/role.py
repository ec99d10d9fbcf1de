"""Tenant role enum for role-based access control."""

from enum import Enum as PyEnum


class TenantRole(str, PyEnum):
    """
    Tenant roles.

    - ADMIN: operates the platform (list, deactivate and reactivate tenants)
      in addition to managing its own signage data
    - USER: manages its own content, playlists, screens and integrations
    """

    ADMIN = "admin"
    USER = "user"
