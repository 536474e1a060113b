from __future__ import annotations

from typing import NewType

RegisterId = NewType("RegisterId", str)
