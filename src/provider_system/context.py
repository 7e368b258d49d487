"""Threshold rules to perform data :term:`evaluation`.

This module contains the :class:`Context` class, which is the base for
all contexts, and the two rules of the system provider:
:class:`DiskUsageContext` and :class:`LoadContext`. The
:class:`~.check.Evaluator` selects a context for each
:class:`~.metric.Metric` by matching the metric's `context` attribute
with the context's `name`.

A context turns a metric into a :class:`~.report.CheckResult`. Scoring
is all or nothing: a passing check earns :attr:`Context.max_score`
points, a failing one earns none.
"""

from __future__ import annotations

import typing

from .metric import Metric
from .report import CheckResult

if typing.TYPE_CHECKING:
    from .resource import LoadAverage, Resource

DISK_USAGE_LIMIT = 90.0
"""Used space in percent from which on the disk check fails."""

LOAD_PER_CPU_LIMIT = 2
"""Load per logical CPU above which the system counts as overloaded."""

MAX_SCORE = 10

FmtDescription = typing.Union[str, typing.Callable[[Metric, "Context"], str]]


class Context:
    name: str
    check_id: str
    check_name: str
    fmt_description: FmtDescription
    remediation: str
    max_score: int

    def __init__(
        self,
        name: str,
        check_id: str,
        check_name: str,
        fmt_description: FmtDescription = "{name} is {value}",
        remediation: str = "",
        max_score: int = MAX_SCORE,
    ) -> None:
        """Creates a context identified by `name`.

        :param name: A context name that is matched by the context
            attribute of :class:`~provider_system.metric.Metric`
        :param check_id: identifier of the produced check, e.g. "SYS-001"
        :param check_name: human readable name of the produced check
        :param fmt_description: string or callable to convert the
            metric to the check description. See :meth:`describe`.
        :param remediation: advice shown for the check
        :param max_score: points awarded if the check passes
        """
        self.name = name
        self.check_id = check_id
        self.check_name = check_name
        self.fmt_description = fmt_description
        self.remediation = remediation
        self.max_score = max_score

    def passes(self, metric: Metric, resource: "Resource") -> bool:
        """Decides whether `metric` satisfies the rule.

        This base implementation accepts every value. Subclasses
        override it with their threshold test.

        :param metric: metric that is to be evaluated
        :param resource: resource that produced the metric (may
            optionally be consulted)
        """
        return True

    def evaluate(self, metric: Metric, resource: "Resource") -> CheckResult:
        """Applies the rule and creates the check result.

        :returns: :class:`~provider_system.report.CheckResult` object
        """
        passed = bool(self.passes(metric, resource))
        return CheckResult(
            id=self.check_id,
            name=self.check_name,
            description=self.describe(metric),
            passed=passed,
            score=self.max_score if passed else 0,
            max_score=self.max_score,
            remediation=self.remediation,
        )

    def describe(self, metric: Metric) -> str:
        """Provides the human-readable check description.

        If :attr:`fmt_description` is a string, it is evaluated as
        format string with the metric's attributes in the root
        namespace. If it is callable, it is called with the metric and
        this context as arguments.
        """
        if isinstance(self.fmt_description, str):
            return self.fmt_description.format(
                name=metric.name,
                value=metric.value,
                uom=metric.uom,
            )
        return self.fmt_description(metric, self)


class DiskUsageContext(Context):
    """Fails when the used space reaches :data:`DISK_USAGE_LIMIT`."""

    limit: float

    def __init__(self, limit: float = DISK_USAGE_LIMIT) -> None:
        super().__init__(
            "disk",
            "SYS-001",
            "Root Disk Usage",
            "Checking if disk usage ({value:.1f}%%) is below %g%%" % limit,
            "Clean up disk space or expand the volume.",
        )
        self.limit = limit

    def passes(self, metric: Metric, resource: "Resource") -> bool:
        return metric.value < self.limit


def _describe_load(metric: Metric, context: Context) -> str:
    return "Load is {0:.2f} (Cores: {1})".format(
        metric.value, typing.cast("LoadAverage", metric.resource).cpus
    )


class LoadContext(Context):
    """Fails when the system is overloaded.

    The limit scales with the machine: the 5-minute load average may be
    up to :data:`LOAD_PER_CPU_LIMIT` times the logical CPU count the
    :class:`~provider_system.resource.LoadAverage` resource read.
    """

    per_cpu: float

    def __init__(self, per_cpu: float = LOAD_PER_CPU_LIMIT) -> None:
        super().__init__(
            "load",
            "SYS-002",
            "System Load (5m)",
            _describe_load,
            "Check running processes, upgrade CPU or optimize workloads.",
        )
        self.per_cpu = per_cpu

    def overloaded(self, load5: float, cpus: int) -> bool:
        return load5 > cpus * self.per_cpu

    def passes(self, metric: Metric, resource: "Resource") -> bool:
        cpus = getattr(resource, "cpus", None)
        if cpus is None:
            raise RuntimeError("no cpu count known for metric", metric.name)
        return not self.overloaded(metric.value, cpus)


class Contexts:
    """Container for collecting all contexts of an evaluator."""

    by_name: dict[str, Context]

    def __init__(self) -> None:
        self.by_name = {}

    def add(self, context: Context) -> None:
        self.by_name[context.name] = context

    def __getitem__(self, context_name: str) -> Context:
        try:
            return self.by_name[context_name]
        except KeyError:
            raise KeyError(
                "cannot find context",
                context_name,
                "known contexts: {0}".format(", ".join(self.by_name.keys())),
            )

    def __contains__(self, context_name: str) -> bool:
        return context_name in self.by_name

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self.by_name)
