"""Password validation dataclasses.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from typing import Iterator

from .constants import RuleKey


@dataclass(frozen=True)
class Violation:
    """Failed rule with its display message."""

    key: RuleKey
    message: str


@dataclass
class ValidationReport:
    """Violations of one validation call, keyed by rule.

    A key is present only for a failed rule.
    """

    errors: dict[RuleKey, str] = field(default_factory=dict)

    def add(self, violation: Violation) -> None:
        """Record violation, one per rule key."""
        self.errors[violation.key] = violation.message

    @property
    def is_invalid(self) -> bool:
        """Verdict of the report: invalid if any rule failed."""
        return bool(self.errors)

    def as_dict(self) -> dict[str, str]:
        """Get plain mapping of rule id to message."""
        return {str(key): message for key, message in self.errors.items()}

    def __contains__(self, key: object) -> bool:
        return key in self.errors

    def __iter__(self) -> Iterator[RuleKey]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, key: RuleKey) -> str:
        return self.errors[key]
