"""Domain model for data :term:`acquisition`.

:class:`Resource` is the base class for the things the plugin looks at.
The :class:`~.check.Evaluator` calls :meth:`Resource.probe` on every
resource, in order, to acquire one :class:`~.metric.Metric` each.

Resources read from a :class:`~.metrics.MetricsSource` passed into
their constructor. If the source cannot deliver a value,
:meth:`Resource.probe` lets :exc:`~.error.MetricUnavailable` propagate
and the evaluator drops the check.
"""

from __future__ import annotations

import logging
import typing

from .metric import Metric

if typing.TYPE_CHECKING:
    from .metrics import MetricsSource

_log = logging.getLogger(__name__)


class Resource:
    """Abstract base class for metric acquisition.

    Subclasses add arguments to the constructor to parametrize
    information retrieval.
    """

    source: "MetricsSource"

    def __init__(self, source: "MetricsSource") -> None:
        self.source = source

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def probe(self) -> Metric:
        """Query system state and return a metric.

        This is the only method called by the evaluator.

        :raises ~provider_system.error.MetricUnavailable: if the
            metrics source fails to deliver the value
        """
        raise NotImplementedError


class DiskUsage(Resource):
    """Used space of the filesystem that holds *path*."""

    path: str

    def __init__(self, source: "MetricsSource", path: str = "/") -> None:
        super().__init__(source)
        self.path = path

    def probe(self) -> Metric:
        _log.debug("probing disk usage of %s", self.path)
        return Metric("disk", self.source.disk_usage(self.path), "%")


class LoadAverage(Resource):
    """5-minute load average together with the logical CPU count.

    The CPU count is only read after the load average was obtained and
    is kept in :attr:`cpus` for the context to consult.
    """

    cpus: typing.Optional[int]

    def __init__(self, source: "MetricsSource") -> None:
        super().__init__(source)
        self.cpus = None

    def probe(self) -> Metric:
        _log.debug("probing load average")
        load5 = self.source.load_average()
        self.cpus = self.source.cpu_count()
        return Metric("load5", load5, context="load")
