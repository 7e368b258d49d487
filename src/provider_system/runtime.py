"""Functions and classes to interface with the system.

This module contains the :class:`Runtime` class that handles uncaught
exceptions, logging and the exit code. The console script does not use
Runtime directly, but decorates its main function with
:func:`guarded` and hands the plugin to :meth:`Runtime.execute`.
"""

from __future__ import annotations

import functools
import io
import logging
import sys
import traceback
import typing
from typing import Any, Callable, NoReturn, Optional, ParamSpec, TypeVar

from typing_extensions import Self

from .output import Output

if typing.TYPE_CHECKING:
    from .provider import Plugin


P = ParamSpec("P")
R = TypeVar("R")

EXIT_OK = 0
EXIT_ERROR = 1


def guarded(
    original_function: Optional[Callable[P, R]] = None,
    verbose: Optional[int] = None,
) -> Callable[P, R]:
    """Runs a function in provider_system's Runtime environment.

    If the decorated function aborts with an uncaught exception, the
    error is printed to stderr (with a traceback if verbose) and the
    process exits with status 1.

    :param verbose: Optional keyword parameter to control verbosity
        level before :meth:`Runtime.execute` has been called. For
        example, use `@guarded(verbose=0)` to turn tracebacks in that
        phase off.
    """

    def _decorate(func: Callable[P, R]):
        @functools.wraps(func)
        # pylint: disable-next=inconsistent-return-statements
        def wrapper(*args: Any, **kwds: Any):
            runtime = Runtime()
            if verbose is not None:
                runtime.verbose = verbose
            try:
                return func(*args, **kwds)
            except Exception:
                runtime._handle_exception()

        return wrapper

    if original_function is not None:
        assert callable(original_function), (
            'Function {!r} not callable. Forgot to add "verbose=" keyword?'.format(
                original_function
            )
        )
        return _decorate(original_function)
    return _decorate  # type: ignore


class Runtime:
    instance = None
    _verbose = 1
    logchan: logging.StreamHandler[io.StringIO]
    output: Output
    stdout = None
    stderr = None
    exitcode: int = 70  # EX_SOFTWARE

    def __new__(cls) -> Self:
        if not cls.instance:
            cls.instance = super(Runtime, cls).__new__(cls)
        return cls.instance

    def __init__(self) -> None:
        if "logchan" in self.__dict__:
            return
        rootlogger = logging.getLogger(__name__.split(".", 1)[0])
        rootlogger.setLevel(logging.DEBUG)
        self.logchan = logging.StreamHandler(io.StringIO())
        self.logchan.setFormatter(logging.Formatter("%(message)s"))
        rootlogger.addHandler(self.logchan)
        self.output = Output(self.logchan)
        self.verbose = self._verbose

    def _handle_exception(self) -> NoReturn:
        exc_type, value = sys.exc_info()[0:2]
        # exceptions without a message fall back to their class name
        message = str(value) or traceback.format_exception_only(exc_type, value)[
            0
        ].strip()
        print(
            "Error running system provider: {0}".format(message),
            file=self.stderr or sys.stderr,
        )
        if self.verbose > 0:
            print(traceback.format_exc(), end="", file=self.stderr or sys.stderr)
        self.exitcode = EXIT_ERROR
        self.sysexit()

    @property
    def verbose(self) -> int:
        return self._verbose

    @verbose.setter
    def verbose(self, verbose: Any) -> None:
        if isinstance(verbose, int):
            self._verbose = verbose
        elif isinstance(verbose, float):
            self._verbose = int(verbose)
        else:
            self._verbose = len(verbose or [])
        if self._verbose >= 3:
            self.logchan.setLevel(logging.DEBUG)
            self._verbose = 3
        elif self._verbose == 2:
            self.logchan.setLevel(logging.INFO)
        else:
            self.logchan.setLevel(logging.WARNING)
        self.output.verbose = self._verbose

    def run(self, plugin: "Plugin") -> None:
        report = plugin.analyze()
        self.output.add(report)
        self.exitcode = EXIT_OK

    def execute(self, plugin: "Plugin", verbose: Any = None) -> NoReturn:
        if verbose is not None:
            self.verbose = verbose
        self.run(plugin)
        print("{0}".format(self.output), end="", file=self.stdout)
        self.sysexit()

    def sysexit(self) -> NoReturn:
        sys.exit(self.exitcode)
