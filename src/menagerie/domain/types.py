"""Collector enums: age-failure policy and loop state."""

from __future__ import annotations

from enum import StrEnum


class ParsePolicy(StrEnum):
    """What to do when any field (age, or name/species under require_text) fails to parse."""

    ABORT = "abort"
    RETRY = "retry"


class CollectorState(StrEnum):
    """States of the collection loop. DONE is terminal."""

    COLLECTING = "collecting"
    DONE = "done"
