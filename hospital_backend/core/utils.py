import logging

from .models import AuditLog

logger = logging.getLogger(__name__)


def log_report_action(user, action, meta=None):
    """Write a report access action to the system DB (alias: default).

    A failing audit write is logged and never breaks the calling view.
    """

    authenticated = getattr(user, 'is_authenticated', False)
    try:
        AuditLog.objects.using('default').create(
            user=user if authenticated else None,
            role_name=user.role_name if authenticated else '',
            action=action,
            meta=meta,
        )
    except Exception:
        logger.exception('AuditLog write failed (action=%s)', action)
