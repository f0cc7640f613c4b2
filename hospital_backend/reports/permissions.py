from hospital_backend.core.models import Role
from hospital_backend.core.permissions import RBACPermission


class DailyReportPermission(RBACPermission):
    """RBAC for the daily report API (read-only).

    - admin, assistant, doctor, nurse: read
    - billing: no access
    """

    read_roles = Role.REPORT_READERS
    write_roles: set = set()
