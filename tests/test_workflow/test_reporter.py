"""
Tests for result reporting.
"""

import pytest


class TestFinalStatus:

    def test_unset_is_unknown(self):
        from jenkins_plugin.models.build import BuildState
        from jenkins_plugin.workflow.reporter import final_status

        assert final_status(BuildState()) == "Unknown"

    @pytest.mark.parametrize("result", ["SUCCESS", "FAILURE", "ABORTED", "UNSTABLE"])
    def test_result_verbatim(self, result):
        from jenkins_plugin.models.build import BuildState
        from jenkins_plugin.workflow.reporter import final_status

        assert final_status(BuildState(result=result)) == result

    def test_report_logs_status(self, caplog):
        import logging
        from jenkins_plugin.models.build import BuildState
        from jenkins_plugin.workflow.reporter import report_result

        state = BuildState(result="FAILURE")
        with caplog.at_level(logging.INFO):
            assert report_result(state) == "FAILURE"

        assert "Jenkins job build final status - FAILURE" in caplog.text
        assert state.result == "FAILURE"


class TestExitCode:

    @pytest.mark.parametrize("status", ["SUCCESS", "FAILURE", "Unknown"])
    def test_default_always_zero(self, status):
        from jenkins_plugin.workflow.reporter import exit_code_for

        assert exit_code_for(status) == 0

    def test_fail_on_unsuccessful(self):
        from jenkins_plugin.workflow.reporter import exit_code_for

        assert exit_code_for("SUCCESS", fail_on_unsuccessful=True) == 0
        assert exit_code_for("ABORTED", fail_on_unsuccessful=True) == 1
        assert exit_code_for("Unknown", fail_on_unsuccessful=True) == 1
