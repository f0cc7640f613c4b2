"""Database router for the hospital backend (dual-database architecture).

The project uses two database aliases:

- ``default``: Django-managed system database (auth, sessions, admin, audit log).
- ``records``: hospital record store holding patients, consultations, clinic
    appointments and daily reports. The daily report screen only ever reads
    from it.

This router enforces:

- Reads/Writes for the ``records`` app go to the ``records`` alias.
- All other apps go to ``default``.
- The ``records`` app migrates only on ``records``; everything else only on
    ``default``.
"""


class HospitalRouter:

    """DB router implementing the split between system DB and records DB."""

    records_alias = 'records'

    system_app_labels = {
        'admin',
        'auth',
        'contenttypes',
        'sessions',
        'messages',
        'staticfiles',
        'core',
        'reports',
    }

    records_app_labels = {
        'records',
    }

    def db_for_read(self, model, **hints):
        """Route read queries to the correct database alias."""
        if model._meta.app_label in self.records_app_labels:
            return self.records_alias

        return 'default'

    def db_for_write(self, model, **hints):
        """Route write queries to the correct database alias."""
        if model._meta.app_label in self.records_app_labels:
            return self.records_alias

        return 'default'

    def allow_relation(self, obj1, obj2, **hints):
        """Allow relations only within the same database."""
        if obj1._state.db and obj2._state.db:
            return obj1._state.db == obj2._state.db
        return None

    def allow_migrate(self, db, app_label, model_name=None, **hints):
        """Control which apps may run migrations on which database."""
        if app_label in self.records_app_labels:
            return db == self.records_alias

        if db == self.records_alias:
            return False

        if db == 'default':
            return app_label in self.system_app_labels

        return None
