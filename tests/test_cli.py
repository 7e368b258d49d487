import io
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

import pytest

from provider_system import SystemProvider, __version__
from provider_system.cli import main, setup_argparser
from provider_system.runtime import Runtime
from provider_system.testing import FakeMetricsSource, MockResult


def run(source: FakeMetricsSource, *args: str) -> MockResult:
    Runtime.instance = None
    stdout = io.StringIO()
    stderr = io.StringIO()
    with (
        mock.patch("sys.exit") as sys_exit,
        mock.patch(
            "provider_system.cli.SystemProvider",
            lambda: SystemProvider(source),
        ),
        redirect_stdout(stdout),
        redirect_stderr(stderr),
    ):
        main(list(args))
    return MockResult(sys_exit, stdout, stderr)


class TestSetupArgparser:
    def test_description(self) -> None:
        parser = setup_argparser("prog", version="1.2.3", description="does things")
        assert "version 1.2.3\n\ndoes things" == parser.description

    def test_verbose_count(self) -> None:
        parser = setup_argparser()
        assert 3 == parser.parse_args(["-vvv"]).verbose
        assert 0 == parser.parse_args([]).verbose

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            setup_argparser("prog", version="1.2.3").parse_args(["--version"])
        assert 0 == excinfo.value.code
        assert "prog 1.2.3\n" == capsys.readouterr().out

    def test_usage_error_exits_with_1(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            setup_argparser().parse_args(["--bogus"])
        assert 1 == excinfo.value.code


class TestMain:
    def test_healthy(self) -> None:
        result = run(FakeMetricsSource(50.0, 1.0, 4))
        assert 0 == result.exitcode
        assert "PROVIDER-SYSTEM PASSED - score 20/20" == result.first_line
        assert (
            "[PASS] SYS-001 Root Disk Usage (10/10): "
            "Checking if disk usage (50.0%) is below 90%" in result.output
        )
        assert "[PASS] SYS-002 System Load (5m) (10/10): Load is 1.00 (Cores: 4)" in (
            result.output
        )

    def test_unhealthy_still_exits_0(self) -> None:
        result = run(FakeMetricsSource(95.0, 10.0, 2))
        assert 0 == result.exitcode
        assert "PROVIDER-SYSTEM FAILED - score 0/20" == result.first_line
        assert "remediation: Clean up disk space or expand the volume." in (
            result.output
        )

    def test_metrics_unavailable(self) -> None:
        result = run(FakeMetricsSource.unavailable())
        assert 0 == result.exitcode
        assert "PROVIDER-SYSTEM NO CHECKS - metrics unavailable" == result.first_line

    def test_unexpected_error_exits_with_1(self) -> None:
        result = run(FakeMetricsSource(disk_error=ZeroDivisionError("boom")))
        assert 1 == result.exitcode
        assert result.stderr is not None
        assert (
            "Error running system provider: boom\n" in result.stderr
        )

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["-V"])
        assert 0 == excinfo.value.code
        assert "provider-system {0}\n".format(__version__) == capsys.readouterr().out
