"""JSON export of the aggregate account view.

Why JSON:
- Interoperates with other tooling and pipelines.
- Keeps a snapshot of what the indexer returned at a given moment.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ConstructedAccount


def export_account_json(*, account: ConstructedAccount, output_path: Path) -> Path:
    """Export a `ConstructedAccount` as UTF-8 JSON with stable formatting."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = account.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
