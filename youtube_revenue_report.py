#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))

from yt_revenue.report import main

if __name__ == "__main__":
    raise SystemExit(main())
