from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


class Role(models.Model):
    """Staff role deciding who may open the daily report.

    ``REPORT_READERS`` is the set of role names with read access to the
    report API; billing staff have an account but no report access.
    """

    ADMIN = 'admin'
    ASSISTANT = 'assistant'
    DOCTOR = 'doctor'
    NURSE = 'nurse'
    BILLING = 'billing'

    REPORT_READERS = frozenset({ADMIN, ASSISTANT, DOCTOR, NURSE})

    name = models.CharField(max_length=64, unique=True, db_index=True)
    label = models.CharField(max_length=128)

    class Meta:
        db_table = 'core_role'
        ordering = ['name']
        verbose_name = 'Role'
        verbose_name_plural = 'Roles'

    def __str__(self) -> str:
        return self.label

    @property
    def can_read_reports(self) -> bool:
        return self.name in self.REPORT_READERS


class User(AbstractUser):
    """Hospital staff account; the role drives report access and is copied into audit rows."""

    email = models.EmailField('email address', blank=True, unique=True)
    role = models.ForeignKey(
        Role,
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name='users',
    )

    class Meta:
        db_table = 'core_user'
        ordering = ['username']
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    @property
    def role_name(self) -> str:
        return self.role.name if self.role_id else ''


class AuditLog(models.Model):
    """Audit log for access to hospital records.

    Tracks who viewed or exported the daily report and for which filters.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
    )
    role_name = models.CharField(max_length=50, db_index=True)
    action = models.CharField(max_length=50, db_index=True)
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)
    meta = models.JSONField(null=True, blank=True)

    class Meta:
        db_table = 'core_auditlog'
        ordering = ['-timestamp', '-id']
        verbose_name = 'Audit Log'
        verbose_name_plural = 'Audit Logs'
        indexes = [
            models.Index(fields=['action', 'timestamp'], name='core_audit_action_ts_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.timestamp} {self.action} ({self.role_name or 'no role'})"
