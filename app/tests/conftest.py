import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.i18n import set_translation_service  # noqa: E402


@pytest.fixture(autouse=True)
def reset_translation_service():
    """Drop any process-wide TranslationService a test installed."""
    yield
    set_translation_service(None)
