from __future__ import annotations

from pathlib import Path
import logging
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def clean_root_logger():
    """Restore root logger handlers/level after a test that calls setup()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    if hasattr(root, "_clerk_configured"):
        del root._clerk_configured
