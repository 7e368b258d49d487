"""Access to operating system metrics.

This module defines the :class:`MetricsSource` capability that
resources read their data from, and :class:`PsutilMetricsSource`, the
implementation backed by :mod:`psutil`. A source is stateless and
read-only, so the same instance may be shared by any number of
evaluations. Tests substitute
:class:`~provider_system.testing.FakeMetricsSource`.
"""

from __future__ import annotations

import logging
import typing

import psutil

from .error import MetricUnavailable

_log = logging.getLogger(__name__)


@typing.runtime_checkable
class MetricsSource(typing.Protocol):
    """Read-only capability exposing the OS metrics we evaluate."""

    def disk_usage(self, path: str) -> float:
        """Used space of the filesystem containing *path* in percent.

        :raises MetricUnavailable: if the usage cannot be determined
        """
        ...

    def load_average(self) -> float:
        """System load average over the last 5 minutes.

        :raises MetricUnavailable: if the load cannot be determined
        """
        ...

    def cpu_count(self) -> int:
        """Number of logical CPUs."""
        ...


class PsutilMetricsSource:
    def disk_usage(self, path: str) -> float:
        try:
            usage = psutil.disk_usage(path)
        except OSError as exc:
            raise MetricUnavailable(
                "cannot read disk usage of {0}: {1}".format(path, exc)
            ) from exc
        _log.debug("disk usage of %s: %s", path, usage)
        # psutil rounds usage.percent to one decimal
        total = usage.used + usage.free
        if not total:
            return 0.0
        return usage.used / total * 100

    def load_average(self) -> float:
        try:
            load1, load5, load15 = psutil.getloadavg()
        except OSError as exc:
            raise MetricUnavailable("cannot read load average: {0}".format(exc)) from exc
        _log.debug("load average: %s %s %s", load1, load5, load15)
        return float(load5)

    def cpu_count(self) -> int:
        # psutil returns None if the count is undetermined
        return psutil.cpu_count(logical=True) or 1
