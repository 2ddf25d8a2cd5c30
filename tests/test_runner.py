"""Tests for the Jest runner module."""

import pytest

from jest_checks_mcp.core.runner import JestRunner, build_jest_command, run_jest


class TestBuildJestCommand:
    """Flag substitution into the command template."""

    def test_base_flags(self):
        cmd = build_jest_command("npx jest {{args}}", "/repo/jest.results.json")

        assert cmd == 'npx jest --testLocationInResults --json --outputFile="/repo/jest.results.json"'

    def test_coverage_flag(self):
        cmd = build_jest_command("npx jest {{args}}", "out.json", coverage=True)

        assert cmd.endswith(" --coverage")

    def test_changed_since_flag(self):
        cmd = build_jest_command("npx jest {{args}}", "out.json", changed_since="main")

        assert cmd.endswith(" --changedSince=main")

    def test_all_flags_order(self):
        cmd = build_jest_command("yarn test {{args}} --ci", "out.json", coverage=True, changed_since="develop")

        assert cmd == (
            'yarn test --testLocationInResults --json --outputFile="out.json" '
            "--coverage --changedSince=develop --ci"
        )

    def test_only_first_placeholder_replaced(self):
        cmd = build_jest_command("jest {{args}} && echo {{args}}", "out.json")

        assert cmd.endswith("&& echo {{args}}")

    def test_template_without_placeholder(self):
        assert build_jest_command("npm test", "out.json") == "npm test"


class TestJestRunner:
    """Running the command never raises on failure."""

    @pytest.mark.asyncio
    async def test_success_exit_code(self, tmp_path):
        run = await run_jest("exit 0", cwd=tmp_path)

        assert run.started is True
        assert run.returncode == 0

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_not_an_error(self, tmp_path):
        """Failing tests exit non-zero; the runner just reports the code."""
        run = await run_jest("exit 1", cwd=tmp_path)

        assert run.returncode == 1
        assert run.error_message is None

    @pytest.mark.asyncio
    async def test_runs_in_cwd(self, tmp_path):
        await run_jest("echo '{}' > marker.json", cwd=tmp_path)

        assert (tmp_path / "marker.json").exists()

    @pytest.mark.asyncio
    async def test_unstartable_process_is_swallowed(self, tmp_path):
        runner = JestRunner("exit 0", cwd=tmp_path / "does-not-exist")

        run = await runner.run()

        assert run.started is False
        assert run.returncode is None
        assert "Execution error" in run.error_message
