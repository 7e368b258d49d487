from provider_system import (
    Plugin,
    PluginInfo,
    PsutilMetricsSource,
    Report,
    SystemProvider,
    __version__,
)
from provider_system.testing import FakeMetricsSource


class TestSystemProvider:
    def test_info(self) -> None:
        assert PluginInfo(
            id="provider-system",
            name="System/OS Scanner",
            version=__version__,
            description="Checks basic OS health metrics (Disk, CPU, etc)",
            author="GOHL Core",
        ) == SystemProvider().info()

    def test_version(self) -> None:
        assert "0.1.0" == SystemProvider().info().version

    def test_implements_plugin_protocol(self) -> None:
        assert isinstance(SystemProvider(), Plugin)

    def test_default_source(self) -> None:
        assert isinstance(SystemProvider().source, PsutilMetricsSource)

    def test_analyze(self) -> None:
        report = SystemProvider(FakeMetricsSource(50.0, 1.0, 4)).analyze()
        assert isinstance(report, Report)
        assert "provider-system" == report.plugin_id
        assert 2 == len(report)
        assert report.passed

    def test_analyze_ignores_config(self) -> None:
        provider = SystemProvider(FakeMetricsSource(95.0, 10.0, 2))
        report = provider.analyze({"threshold": "99"})
        assert [False, False] == [check.passed for check in report]

    def test_analyze_with_unavailable_metrics(self) -> None:
        report = SystemProvider(FakeMetricsSource.unavailable()).analyze(None)
        assert 0 == len(report)

    def test_evaluate_with_other_source(self) -> None:
        provider = SystemProvider(FakeMetricsSource.unavailable())
        report = provider.evaluate(FakeMetricsSource(95.0, 1.0, 4))
        assert [False, True] == [check.passed for check in report]
