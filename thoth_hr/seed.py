"""Bundled seed dataset used on a store's first-ever load."""

import json
from importlib import resources

from thoth_hr.models import Snapshot
from thoth_hr.models.factories import RecordFactory
from thoth_hr.repositories.serialization import snapshot_from_dict, unwrap_state

SEED_RESOURCE = "seed.json"


def load_seed_snapshot(factory: RecordFactory | None = None) -> Snapshot:
    """Decode the bundled seed dataset.

    Records go through the factory, so missing payroll salary, status or
    date are backfilled here.
    """
    text = resources.files("thoth_hr.data").joinpath(SEED_RESOURCE).read_text(encoding="utf-8")
    return snapshot_from_dict(unwrap_state(json.loads(text)), factory)
