from dataclasses import dataclass, field

SEVERITIES = ("High", "Medium", "Low")


@dataclass(frozen=True)
class Risk:
    """A risk or red flag found in a contract."""

    severity: str
    description: str
    snippet: str


@dataclass(frozen=True)
class KeyDate:
    """A date or deadline and the obligation tied to it."""

    date: str
    obligation: str


@dataclass(frozen=True)
class ContractAnalysis:
    """Structured review of a single contract."""

    summary: str
    risks: list[Risk] = field(default_factory=list)
    missing_clauses: list[str] = field(default_factory=list)
    suggested_fixes: list[str] = field(default_factory=list)
    key_dates: list[KeyDate] = field(default_factory=list)
