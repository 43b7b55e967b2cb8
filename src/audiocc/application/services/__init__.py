"""Application services."""

from .organize_service import OrganizeRequest, OrganizeService

__all__ = ["OrganizeRequest", "OrganizeService"]
