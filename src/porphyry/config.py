from __future__ import annotations

import os


PORPHYRY_UNIVERSE = int(os.environ.get("PORPHYRY_UNIVERSE", "128"))
PORPHYRY_DOT_PATH = os.environ.get("PORPHYRY_DOT_PATH", "porphyry.dot")
