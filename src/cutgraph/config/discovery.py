"""Locating ``cutgraph.toml``.

The file is found by walking up from the working directory, the way git
finds ``.git``. ``CUTGRAPH_CONFIG`` names a file directly and disables the
walk; ``--config`` on the command line bypasses both. Reading the file is
left to :class:`cutgraph.config.settings.CutgraphSettings`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "cutgraph.toml"
CONFIG_ENV_VAR = "CUTGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``cutgraph.toml`` at or above *start*, if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
