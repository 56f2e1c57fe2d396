"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .lecturer_service import LecturerAvailabilityService, LecturerRepositoryProtocol

__all__ = ["LecturerAvailabilityService", "LecturerRepositoryProtocol"]
