"""Outcomes of an evaluation.

The :class:`CheckResult` class holds the verdict of one threshold rule.
The :class:`Report` class provides the ordered result container handed
to the plugin host, with access functions and totals.
"""

from __future__ import annotations

import typing


class CheckResult(typing.NamedTuple):
    """Pass/fail verdict of a single check.

    Scoring is binary: :attr:`score` is either 0 or :attr:`max_score`.
    """

    id: str
    name: str
    description: str
    passed: bool
    score: int
    max_score: int
    remediation: str


class Report:
    """Ordered container of check results produced by one evaluation.

    Results keep the order in which they were added. Unlike a plain
    list, a report can also be queried by check id and sums up scores.
    """

    plugin_id: str
    checks: list[CheckResult]
    by_id: dict[str, CheckResult]

    def __init__(self, plugin_id: str, *checks: CheckResult) -> None:
        self.plugin_id = plugin_id
        self.checks = []
        self.by_id = {}
        if checks:
            self.add(*checks)

    def add(self, *checks: CheckResult) -> "Report":
        """Appends results to the report.

        :raises ValueError: if a check is not a :class:`CheckResult` or
            its id is already present
        """
        for check in checks:
            if not isinstance(check, CheckResult):  # type: ignore
                raise ValueError("trying to add non-CheckResult to Report", check)
            if check.id in self.by_id:
                raise ValueError("duplicate check id", check.id)
            self.checks.append(check)
            self.by_id[check.id] = check
        return self

    def __iter__(self) -> typing.Iterator[CheckResult]:
        return iter(self.checks)

    def __len__(self) -> int:
        return len(self.checks)

    def __getitem__(self, item: typing.Union[int, str]) -> CheckResult:
        """Access result by index or check id.

        :raises KeyError: if no result with the given id is present
        :raises IndexError: if the index is out of range
        """
        if isinstance(item, int):
            return self.checks[item]
        return self.by_id[item]

    def __contains__(self, check_id: str) -> bool:
        return check_id in self.by_id

    def __repr__(self) -> str:
        return "Report(%r, %d checks)" % (self.plugin_id, len(self))

    @property
    def score(self) -> int:
        return sum(check.score for check in self.checks)

    @property
    def max_score(self) -> int:
        return sum(check.max_score for check in self.checks)

    @property
    def passed(self) -> bool:
        """True if every check passed.

        An empty report counts as passed. Callers who care about missing
        metrics should test ``len(report)``.
        """
        return all(check.passed for check in self.checks)

    @property
    def failed(self) -> list[CheckResult]:
        return [check for check in self.checks if not check.passed]
