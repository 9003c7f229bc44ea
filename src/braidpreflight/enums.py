"""Type-safe enums for braid preflight."""

from enum import Enum


class Severity(Enum):
    """Constraint message severity"""
    WARNING = "warning"
    ERROR = "error"


class ScoreBand(Enum):
    """Manufacturability status shown next to the score"""
    GREEN = "Green"      # Ready to braid
    CAUTION = "Caution"  # Works, but watch the flagged zones
    RISK = "Risk"        # Expect iterations on the machine
    FAIL = "Fail"        # Not worth a physical trial
