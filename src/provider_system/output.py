from __future__ import annotations

import io
import logging
import typing

if typing.TYPE_CHECKING:
    from .report import CheckResult, Report


class Output:
    logchan: logging.StreamHandler[io.StringIO]
    verbose: int
    status: str
    out: list[str]

    def __init__(
        self, logchan: logging.StreamHandler[io.StringIO], verbose: int = 0
    ) -> None:
        self.logchan = logchan
        self.verbose = verbose
        self.status = ""
        self.out = []

    def add(self, report: "Report") -> None:
        self.status = self.format_status(report)
        for check in report:
            self.add_longoutput(self.format_check(check))

    @staticmethod
    def format_status(report: "Report") -> str:
        prefix = report.plugin_id.upper() + " " if report.plugin_id else ""
        if not len(report):
            return "{0}NO CHECKS - metrics unavailable".format(prefix)
        return "{0}{1} - score {2}/{3}".format(
            prefix,
            "PASSED" if report.passed else "FAILED",
            report.score,
            report.max_score,
        )

    @staticmethod
    def format_check(check: "CheckResult") -> list[str]:
        lines = [
            "[{0}] {1} {2} ({3}/{4}): {5}".format(
                "PASS" if check.passed else "FAIL",
                check.id,
                check.name,
                check.score,
                check.max_score,
                check.description,
            )
        ]
        if not check.passed and check.remediation:
            lines.append("  remediation: {0}".format(check.remediation))
        return lines

    def add_longoutput(self, text: typing.Union[str, list[str], tuple[str]]) -> None:
        if isinstance(text, (list, tuple)):
            for line in text:
                self.add_longoutput(line)
        else:
            self.out.append(text.rstrip("\n"))

    def __str__(self) -> str:
        output = [
            elem
            for elem in [self.status]
            + self.out
            + [self.logchan.stream.getvalue().rstrip("\n")]
            if elem
        ]
        return "\n".join(output) + "\n"
