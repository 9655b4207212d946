"""
Export - Write the roster to a JSON file.

Export only: there is no matching import. The document is a JSON array of
players, each with id, name and games, pretty-printed with 2-space indent.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_EXPORT_INDENT, get_export_path
from .models.player import Roster

logger = logging.getLogger(__name__)


def roster_to_json(roster: Roster, indent: int = DEFAULT_EXPORT_INDENT) -> str:
    return json.dumps(roster.to_list(), indent=indent, ensure_ascii=False)


def export_roster(roster: Roster, path: Optional[Union[str, Path]] = None,
                  indent: int = DEFAULT_EXPORT_INDENT) -> Path:
    """
    Serialize the roster and write it as UTF-8.

    Args:
        roster: Roster snapshot to export
        path: Output file (defaults to HOOPSTATS_EXPORT_PATH or basketball_stats.json)
        indent: JSON indentation

    Returns:
        Path the file was written to
    """
    out = Path(path) if path is not None else Path(get_export_path())
    out.parent.mkdir(parents=True, exist_ok=True)

    out.write_bytes(roster_to_json(roster, indent=indent).encode('utf-8'))
    logger.info("Exported %d players to %s", len(roster), out)
    return out
