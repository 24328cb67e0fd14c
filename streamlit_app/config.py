"""Environment-variable-based configuration for the plan viewer."""

from __future__ import annotations

import os
from pathlib import Path

PROFILES_DIR: Path = Path(
    os.environ.get("PERIODIZATION_PROFILES_DIR", str(Path(__file__).parent / "profiles"))
).expanduser()
DEFAULT_MESOCYCLE_WEEKS: int = int(os.environ.get("PERIODIZATION_DEFAULT_WEEKS", "5"))
LOG_LEVEL: str = os.environ.get("PERIODIZATION_LOG_LEVEL", "INFO")
