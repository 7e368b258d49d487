import io
import sys
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

import pytest

from provider_system import MetricUnavailable
from provider_system.testing import FakeMetricsSource, MockResult


class TestFakeMetricsSource:
    def test_fixed_values(self) -> None:
        source = FakeMetricsSource(12.5, 0.75, 3)
        assert 12.5 == source.disk_usage("/")
        assert 0.75 == source.load_average()
        assert 3 == source.cpu_count()

    def test_records_paths(self) -> None:
        source = FakeMetricsSource()
        source.disk_usage("/")
        source.disk_usage("/home")
        assert ["/", "/home"] == source.paths

    def test_injected_failures(self) -> None:
        source = FakeMetricsSource(disk_error=MetricUnavailable, load_error=OSError)
        with pytest.raises(MetricUnavailable):
            source.disk_usage("/")
        with pytest.raises(OSError):
            source.load_average()

    def test_unavailable(self) -> None:
        source = FakeMetricsSource.unavailable()
        with pytest.raises(MetricUnavailable):
            source.disk_usage("/")
        with pytest.raises(MetricUnavailable):
            source.load_average()


def test_mock_result() -> None:
    file_stdout = io.StringIO()
    file_stderr = io.StringIO()

    with (
        mock.patch("sys.exit") as sys_exit,
        redirect_stdout(file_stdout),
        redirect_stderr(file_stderr),
    ):
        print("test!")
        print("oops", file=sys.stderr)
        sys.exit(1)
    result = MockResult(sys_exit, file_stdout, file_stderr)

    assert result.first_line == "test!"
    assert result.exitcode == 1
    assert result.stdout == "test!\n"
    assert result.stderr == "oops\n"
    assert result.output == "test!\noops\n"
