import pytest

from provider_system import CheckResult, Report


def make_check(check_id: str, passed: bool = True) -> CheckResult:
    return CheckResult(
        id=check_id,
        name=check_id.lower(),
        description="",
        passed=passed,
        score=10 if passed else 0,
        max_score=10,
        remediation="",
    )


class TestCheckResult:
    def test_immutable(self) -> None:
        check = make_check("A")
        with pytest.raises(AttributeError):
            check.score = 0  # type: ignore


class TestReport:
    def test_lookup_by_index(self) -> None:
        a, b = make_check("A"), make_check("B")
        assert b == Report("p", a, b)[1]

    def test_lookup_by_id(self) -> None:
        a, b = make_check("A"), make_check("B")
        assert a == Report("p", a, b)["A"]

    def test_lookup_unknown_id(self) -> None:
        with pytest.raises(KeyError):
            Report("p")["A"]

    def test_iterates_in_insertion_order(self) -> None:
        report = Report("p")
        report.add(make_check("B", False), make_check("A"))
        assert ["B", "A"] == [check.id for check in report]

    def test_len(self) -> None:
        assert 2 == len(Report("p", make_check("A"), make_check("B")))

    def test_contains(self) -> None:
        report = Report("p", make_check("A"))
        assert "A" in report
        assert "B" not in report

    def test_add_should_fail_unless_check_result_passed(self) -> None:
        with pytest.raises(ValueError):
            Report("p", True)  # type: ignore

    def test_add_should_fail_on_duplicate_id(self) -> None:
        with pytest.raises(ValueError):
            Report("p", make_check("A"), make_check("A"))

    def test_totals(self) -> None:
        report = Report("p", make_check("A"), make_check("B", False))
        assert 10 == report.score
        assert 20 == report.max_score
        assert not report.passed
        assert ["B"] == [check.id for check in report.failed]

    def test_empty_report(self) -> None:
        report = Report("p")
        assert 0 == report.score == report.max_score
        assert report.passed
        assert [] == report.failed

    def test_repr(self) -> None:
        assert "Report('p', 1 checks)" == repr(Report("p", make_check("A")))
