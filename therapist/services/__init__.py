from .admin_service import TherapistAdminService
from .compliance_service import ComplianceService
from .rate_service import RateCapService

__all__ = [
    "ComplianceService",
    "RateCapService",
    "TherapistAdminService",
]
