"""Service layer exports."""

from .band_service import BandService, BandSkillAverage, MemberContribution
from .bonus_service import BonusService
from .errors import SnapshotLoadError, StoreUnavailableError
from .performance_service import PerformanceService

__all__ = [
    "BandService",
    "BandSkillAverage",
    "BonusService",
    "MemberContribution",
    "PerformanceService",
    "SnapshotLoadError",
    "StoreUnavailableError",
]
