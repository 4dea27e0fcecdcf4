from __future__ import annotations

import subprocess
import sys


def run_cli(*args: str, timeout: int = 30) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "csquery.cli", *args],
        capture_output=True,
        text=True,
        timeout=timeout,
    )


class TestCliLeafCommands:
    def test_term(self):
        result = run_cli("term", "foo", "--field", "bar")
        assert result.returncode == 0
        assert result.stdout.strip() == "(term field=bar 'foo')"

    def test_term_with_options(self):
        result = run_cli("term", "apple", "-F", "identifier", "-O", "boost=4")
        assert result.returncode == 0
        assert result.stdout.strip() == "(term field=identifier boost=4 'apple')"

    def test_string_option_is_quoted(self):
        result = run_cli("phrase", "kast vaal", "--option", "boost=high")
        assert result.returncode == 0
        assert result.stdout.strip() == "(phrase boost=\"high\" 'kast vaal')"

    def test_prefix(self):
        result = run_cli("prefix", "gam", "--field", "model")
        assert result.returncode == 0
        assert result.stdout.strip() == "(prefix field=model 'gam')"

    def test_near(self):
        result = run_cli("near", "foo", "--field", "bar", "--distance", "2")
        assert result.returncode == 0
        assert result.stdout.strip() == "(near field=bar distance=2 'foo')"

    def test_matchall(self):
        result = run_cli("matchall")
        assert result.returncode == 0
        assert result.stdout.strip() == "matchall"

    def test_invalid_option_fails(self):
        result = run_cli("term", "foo", "--option", "boost")
        assert result.returncode == 1
        assert "Error:" in result.stderr


class TestCliRange:
    def test_numeric_bounds(self):
        result = run_cli("range", "foo", "--lower", "0", "--upper", "10")
        assert result.returncode == 0
        assert result.stdout.strip() == "(range field=foo [0,10])"

    def test_open_upper(self):
        result = run_cli("range", "year", "--lower", "1990")
        assert result.returncode == 0
        assert result.stdout.strip() == "(range field=year [1990,})"

    def test_string_bounds(self):
        result = run_cli("range", "name", "-l", "a", "-u", "m")
        assert result.returncode == 0
        assert result.stdout.strip() == "(range field=name ['a','m'])"

    def test_missing_bounds_fails(self):
        result = run_cli("range", "foo")
        assert result.returncode == 1
        assert "Error:" in result.stderr

    def test_mixed_bounds_fails(self):
        result = run_cli("range", "foo", "--lower", "a", "--upper", "5")
        assert result.returncode == 1
        assert "same type" in result.stderr


class TestCliCompound:
    def test_and(self):
        result = run_cli("and", "(term field=bar 'foo')", "(term field=bar2 'foo2')", "-O", "boost=5")
        assert result.returncode == 0
        assert result.stdout.strip() == "(and boost=5 (term field=bar 'foo') (term field=bar2 'foo2'))"

    def test_or(self):
        result = run_cli("or", "(phrase field=model 'kast vaal')", "matchall")
        assert result.returncode == 0
        assert result.stdout.strip() == "(or (phrase field=model 'kast vaal') matchall)"

    def test_not(self):
        result = run_cli("not", "(term field=bar 'foo')")
        assert result.returncode == 0
        assert result.stdout.strip() == "(not (term field=bar 'foo'))"
