from __future__ import annotations

import importlib

from django.conf import settings
from django.test.runner import DiscoverRunner


class HospitalTestRunner(DiscoverRunner):
	"""Test runner that loads tests per installed project app.

	Filesystem discovery from the repository root would also walk into
	unrelated directories, so without explicit labels the suite is built
	from the dotted ``<app>.tests`` packages of every ``hospital_backend.*``
	app. Test databases are created for every alias the selected tests
	declare (``default`` and ``records``).
	"""

	def build_suite(self, test_labels=None, **kwargs):
		if not test_labels:
			labels: list[str] = []
			for app in settings.INSTALLED_APPS:
				if not app.startswith("hospital_backend."):
					continue
				candidate = f"{app}.tests"
				try:
					importlib.import_module(candidate)
				except ImportError:
					continue
				labels.append(candidate)

			# Fallback: if nothing was importable, keep Django's default behavior.
			test_labels = labels or None

		return super().build_suite(test_labels, **kwargs)
