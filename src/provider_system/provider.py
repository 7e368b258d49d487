"""Plugin contract exposed to the host.

A host loads a :class:`Plugin`, asks it for its :class:`PluginInfo` and
calls :meth:`Plugin.analyze` to get a
:class:`~provider_system.report.Report` that it renders itself.
:class:`SystemProvider` is the plugin implemented by this package.
"""

from __future__ import annotations

import typing

from . import __version__
from .check import PLUGIN_ID, evaluate
from .metrics import MetricsSource, PsutilMetricsSource
from .report import Report


class PluginInfo(typing.NamedTuple):
    id: str
    name: str
    version: str
    description: str
    author: str


@typing.runtime_checkable
class Plugin(typing.Protocol):
    def info(self) -> PluginInfo: ...

    def analyze(
        self, config: typing.Optional[typing.Mapping[str, str]] = None
    ) -> Report: ...


class SystemProvider:
    """Checks basic OS health metrics.

    :param source: metrics source to read from, defaults to a
        :class:`~provider_system.metrics.PsutilMetricsSource`
    """

    source: MetricsSource

    def __init__(self, source: typing.Optional[MetricsSource] = None) -> None:
        if source is None:
            source = PsutilMetricsSource()
        self.source = source

    def info(self) -> PluginInfo:
        return PluginInfo(
            id=PLUGIN_ID,
            name="System/OS Scanner",
            version=__version__,
            description="Checks basic OS health metrics (Disk, CPU, etc)",
            author="GOHL Core",
        )

    def evaluate(self, source: typing.Optional[MetricsSource] = None) -> Report:
        """Evaluates the checks against `source` or the configured source."""
        if source is None:
            source = self.source
        return evaluate(source, self.info().id)

    # pylint: disable-next=unused-argument
    def analyze(
        self, config: typing.Optional[typing.Mapping[str, str]] = None
    ) -> Report:
        """Host entry point.

        The host's `config` mapping is accepted for compatibility with
        the plugin contract. Thresholds are fixed, so it is ignored.
        """
        return self.evaluate()
