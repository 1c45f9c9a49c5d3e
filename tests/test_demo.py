"""Tests for run_demo and run_self_check."""

from __future__ import annotations

import pytest

from samplecalc import demo
from samplecalc.demo import SELF_CHECKS, DemoReport, run_demo, run_self_check
from samplecalc.exceptions import ConfigError, SampleCalcError, SelfCheckError

pytestmark = pytest.mark.usefixtures("clean_config")


class TestRunDemo:
    """Tests for the scripted demo."""

    def test_result(self) -> None:
        assert run_demo().result == 30

    def test_scientific_state(self) -> None:
        report = run_demo()
        assert report.scientific_value == 150
        assert report.scientific_memory == 150

    def test_advanced_state(self) -> None:
        report = run_demo()
        assert report.advanced_value == 300
        assert report.history == ["add 100"]

    def test_as_dict(self) -> None:
        assert run_demo().as_dict() == {
            "result": 30,
            "scientific_value": 150,
            "scientific_memory": 150,
            "advanced_value": 300,
            "history": ["add 100"],
        }

    def test_as_dict_copies_history(self) -> None:
        report = DemoReport(1, 2, 3, 4, ["add 1"])
        report.as_dict()["history"].append("x")
        assert report.history == ["add 1"]


class TestSelfCheck:
    """Tests for the built-in self-check."""

    def test_all_checks_pass(self) -> None:
        assert run_self_check() == [name for name, _ in SELF_CHECKS]

    def test_first_check_is_add(self) -> None:
        assert SELF_CHECKS[0][0] == "add"

    def test_failure_raises_with_check_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        broken = (("add", lambda: True), ("broken", lambda: False), ("never", lambda: True))
        monkeypatch.setattr(demo, "SELF_CHECKS", broken)
        with pytest.raises(SelfCheckError, match="'broken' failed") as excinfo:
            run_self_check()
        assert excinfo.value.check == "broken"

    def test_self_check_error_is_samplecalc_error(self) -> None:
        assert issubclass(SelfCheckError, SampleCalcError)


class TestConfigCheck:
    """Tests for the configuration self-check."""

    def test_config_check_is_last(self) -> None:
        assert SELF_CHECKS[-1][0] == "config"

    def test_invalid_environment_raises_config_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SAMPLECALC_SUM_SEED", "abc")
        with pytest.raises(ConfigError, match="SUM_SEED"):
            run_self_check()

    def test_report_as_dict_documented(self) -> None:
        assert DemoReport.as_dict.__doc__
