"""Controller logic for evaluation.

This module contains the :class:`Evaluator` class which orchestrates
the stages of an evaluation: it probes every resource, looks up the
context for the returned metric and collects the resulting checks in a
:class:`~.report.Report`. :func:`evaluate` wires up the two system
checks against a metrics source.

A resource whose metric cannot be read is skipped: the report simply
contains fewer checks. No other error is swallowed.
"""

from __future__ import annotations

import logging
import typing

from .context import Context, Contexts, DiskUsageContext, LoadContext
from .error import MetricUnavailable
from .report import Report
from .resource import DiskUsage, LoadAverage, Resource

if typing.TYPE_CHECKING:
    from .metrics import MetricsSource

PLUGIN_ID = "provider-system"

_log = logging.getLogger(__name__)


class Evaluator:
    resources: list[Resource]
    contexts: Contexts
    plugin_id: str

    def __init__(
        self,
        *objects: typing.Union[Resource, Context],
        plugin_id: str = PLUGIN_ID,
    ) -> None:
        """Creates and configures an evaluator.

        Resources and contexts are passed to the :meth:`add` method.
        Resources are probed in the order they were added, which is
        also the order of the checks in the report.
        """
        self.resources = []
        self.contexts = Contexts()
        self.plugin_id = plugin_id
        self.add(*objects)

    def add(self, *objects: typing.Union[Resource, Context]) -> "Evaluator":
        """Adds domain objects to the evaluator.

        :param objects: one or more :class:`~provider_system.resource.Resource`
            or :class:`~provider_system.context.Context` objects
        :raises TypeError: for any other kind of object
        """
        for obj in objects:
            if isinstance(obj, Resource):
                self.resources.append(obj)
            elif isinstance(obj, Context):
                self.contexts.add(obj)
            else:
                raise TypeError(
                    "cannot add type {0} to evaluator".format(type(obj)), obj
                )
        return self

    def _evaluate_resource(self, resource: Resource, report: Report) -> None:
        try:
            metric = resource.probe()
        except MetricUnavailable as exc:
            _log.info("%s unavailable, skipping check: %s", resource.name, exc)
            return
        context = self.contexts[metric.context]
        metric = metric.replace(contextobj=context, resource=resource)
        result = metric.evaluate()
        _log.debug(
            "%s %s: %s", result.id, "passed" if result.passed else "failed", metric
        )
        report.add(result)

    def __call__(self) -> Report:
        """Actually run the evaluation.

        :returns: a new :class:`~provider_system.report.Report` on
            every call
        """
        report = Report(self.plugin_id)
        for resource in self.resources:
            self._evaluate_resource(resource, report)
        return report


def evaluate(source: "MetricsSource", plugin_id: str = PLUGIN_ID) -> Report:
    """Runs the disk and load checks against `source`.

    The disk check (SYS-001) always precedes the load check (SYS-002).
    A check whose metric is unavailable is left out of the report, so
    the result holds zero, one or two checks. This function never
    raises because of a failed metric read.

    :param source: :class:`~provider_system.metrics.MetricsSource` to
        read the metrics from
    :param plugin_id: identifier the report is tagged with
    """
    evaluator = Evaluator(
        DiskUsage(source, "/"),
        LoadAverage(source),
        DiskUsageContext(),
        LoadContext(),
        plugin_id=plugin_id,
    )
    return evaluator()
