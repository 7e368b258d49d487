"""Helpers for testing code that uses provider_system."""

from __future__ import annotations

import io
import typing
from unittest.mock import Mock

from .error import MetricUnavailable


class FakeMetricsSource:
    """Deterministic stand-in for a
    :class:`~provider_system.metrics.MetricsSource`.

    Returns the fixed values it was created with. Passing an exception
    (instance or class) as `disk_error` or `load_error` makes the
    corresponding read raise it instead.
    """

    def __init__(
        self,
        disk_usage: float = 0.0,
        load_average: float = 0.0,
        cpu_count: int = 1,
        disk_error: typing.Optional[
            typing.Union[BaseException, type[BaseException]]
        ] = None,
        load_error: typing.Optional[
            typing.Union[BaseException, type[BaseException]]
        ] = None,
    ) -> None:
        self._disk_usage = disk_usage
        self._load_average = load_average
        self._cpu_count = cpu_count
        self.disk_error = disk_error
        self.load_error = load_error
        self.paths: list[str] = []

    @classmethod
    def unavailable(cls) -> "FakeMetricsSource":
        """A source on which every read fails."""
        return cls(
            disk_error=MetricUnavailable("disk failure"),
            load_error=MetricUnavailable("load read error"),
        )

    def disk_usage(self, path: str) -> float:
        self.paths.append(path)
        if self.disk_error is not None:
            raise self.disk_error
        return self._disk_usage

    def load_average(self) -> float:
        if self.load_error is not None:
            raise self.load_error
        return self._load_average

    def cpu_count(self) -> int:
        return self._cpu_count


class MockResult:
    """Collects what the console script wrote and how it exited.

    Pass the mock that replaced :func:`sys.exit` and the streams that
    stdout and stderr were redirected to.
    """

    def __init__(
        self,
        sys_exit_mock: Mock,
        stdout: typing.Optional[io.StringIO] = None,
        stderr: typing.Optional[io.StringIO] = None,
    ) -> None:
        self.__sys_exit = sys_exit_mock
        self.__stdout = stdout.getvalue() if stdout else None
        self.__stderr = stderr.getvalue() if stderr else None

    @property
    def exitcode(self) -> int:
        """The first argument of the first :func:`sys.exit` call."""
        return self.__sys_exit.call_args[0][0]

    @property
    def stdout(self) -> typing.Optional[str]:
        return self.__stdout

    @property
    def stderr(self) -> typing.Optional[str]:
        return self.__stderr

    @property
    def output(self) -> str:
        out = ""
        if self.__stdout:
            out += self.__stdout
        if self.__stderr:
            out += self.__stderr
        return out

    @property
    def first_line(self) -> typing.Optional[str]:
        """The status line, i.e. the first line of the output."""
        if self.output:
            return self.output.split("\n", 1)[0]
        return None
