from __future__ import annotations
from enum import StrEnum

class DurationMethod(StrEnum):
    quick = "quick"      # container header, falls back to precise
    precise = "precise"  # full decode to a null sink
