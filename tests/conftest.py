"""Shared fixtures for table and generator tests."""

import json
import sys
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so imports like `import colos` work
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


TARGET_TEMPLATE = '''"""Generated table fixture."""

from enum import Enum

from location_hints import LocationHint


class Colo(Enum):
    # BEGIN GENERATED COLOS
    OLD = ("OLD", "Stale Entry, Nowhere", None)
    # END GENERATED COLOS

    def __init__(self, code, display_name, location_hint):
        self.code = code
'''


@pytest.fixture
def components_payload() -> dict:
    """Status page listing: two region groups, four colos, one non-colo component."""
    return {
        "page": {"id": "yh6f0r4529hb", "name": "Cloudflare"},
        "components": [
            {"id": "g1", "name": "North America", "group": True, "group_id": None},
            {"id": "g2", "name": "Asia", "group": True, "group_id": None},
            {"id": "c1", "name": "Los Angeles, CA, United States - (LAX)", "group": False, "group_id": "g1"},
            {"id": "c2", "name": "Ashburn, VA, United States - (IAD)", "group": False, "group_id": "g1"},
            {"id": "c3", "name": "Singapore, Singapore - (SIN)", "group": False, "group_id": "g2"},
            {"id": "c4", "name": "Port-au-Prince, Haiti - (PAP)", "group": False, "group_id": "g1"},
            {"id": "c5", "name": "Cloudflare Sites and Services", "group": False, "group_id": None},
        ],
    }


@pytest.fixture
def latency_payload() -> dict:
    """Latency per colo; PAP deliberately missing, SIN carries an unknown hint."""
    return {
        "colos": [
            {"colo": "LAX", "hints": {"wnam": 11.8, "enam": 62.0, "apac": 150.3}},
            {"colo": "IAD", "hints": {"wnam": 64.1, "enam": 2.4}},
            {"colo": "SIN", "hints": {"apac": 3.0, "oc": 92.7, "antarctica": 1.0}},
            {"colo": "ZZZ", "hints": {"weur": 5.0}},
        ],
    }


@pytest.fixture
def snapshot_paths(tmp_path: Path, components_payload: dict, latency_payload: dict) -> dict[str, str]:
    """Write both snapshots and a target module into a temporary layout."""
    paths = {
        "components": str(tmp_path / "components.json"),
        "latency": str(tmp_path / "where.durableobjects.live.json"),
        "output": str(tmp_path / "colos.py"),
    }
    _write_json(paths["components"], components_payload)
    _write_json(paths["latency"], latency_payload)
    Path(paths["output"]).write_text(TARGET_TEMPLATE, encoding="utf-8")
    return paths


def _write_json(path: str, payload: dict) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh)
