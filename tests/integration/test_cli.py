"""
Tests for the legitid command line.
"""

import pytest
from click.testing import CliRunner

from legitid.cli.main import cli
from legitid.config import ALPHABET
from legitid.ids import check_id


@pytest.fixture
def runner():
    return CliRunner()


def test_create_prints_valid_identifiers(runner, salt):
    result = runner.invoke(cli, ["create", "--count", "3"])

    assert result.exit_code == 0, result.output
    identifiers = result.output.split()
    assert len(identifiers) == 3
    for identifier in identifiers:
        assert set(identifier) <= set(ALPHABET)
        assert check_id(identifier, salt)


def test_create_with_salt_and_length(runner):
    result = runner.invoke(cli, ["create", "--length", "20", "--salt", "cli:"])

    assert result.exit_code == 0, result.output
    identifier = result.output.strip()
    assert 19 <= len(identifier) <= 20
    assert check_id(identifier, "cli:")
    assert not check_id(identifier)


def test_create_reads_salt_from_environment(runner):
    result = runner.invoke(cli, ["create"], env={"LEGITID_SALT": "from-env:"})

    assert result.exit_code == 0, result.output
    assert check_id(result.output.strip(), "from-env:")


@pytest.mark.parametrize("length", ["0", "55"])
def test_create_rejects_bad_length(runner, length):
    result = runner.invoke(cli, ["create", "--length", length])

    assert result.exit_code == 2
    assert "--length" in result.output


def test_verify_valid_identifier(runner):
    identifier = runner.invoke(cli, ["create", "--salt", "v:"]).output.strip()
    result = runner.invoke(cli, ["verify", identifier, "--salt", "v:"])

    assert result.exit_code == 0
    assert result.output.strip() == "valid"


@pytest.mark.parametrize("identifier", ["a", "invalid@#$"])
def test_verify_invalid_identifier(runner, identifier):
    result = runner.invoke(cli, ["verify", identifier])

    assert result.exit_code == 1
    assert result.output.strip() == "invalid"


def test_verify_with_wrong_salt(runner):
    identifier = runner.invoke(cli, ["create", "--salt", "right:"]).output.strip()
    result = runner.invoke(cli, ["verify", identifier, "--salt", "wrong:"])

    assert result.exit_code == 1


def test_info(runner):
    result = runner.invoke(cli, ["info", "--length", "10"])

    assert result.exit_code == 0, result.output
    assert "Hex length: 14" in result.output
    assert "Identifier length: 9-10 characters" in result.output
    assert "Digest digits: 7 (28 bits)" in result.output
    assert "Warning" not in result.output


def test_info_warns_for_unverifiable_length(runner):
    result = runner.invoke(cli, ["info", "--length", "1"])

    assert result.exit_code == 0
    assert "never verify" in result.output


def test_info_rejects_bad_length(runner):
    result = runner.invoke(cli, ["info", "--length", "60"])
    assert result.exit_code == 2


def test_selftest_passes(runner):
    result = runner.invoke(
        cli, ["selftest", "--iterations", "10", "--min-length", "5", "--max-length", "7"]
    )

    assert result.exit_code == 0, result.output
    assert "length 5: 10/10 (100.0%)" in result.output
    assert "All checks passed" in result.output


def test_selftest_reports_failures(runner):
    result = runner.invoke(
        cli, ["selftest", "--iterations", "3", "--min-length", "1", "--max-length", "1"]
    )

    assert result.exit_code == 1
    assert "Some checks failed" in result.output


def test_selftest_rejects_inverted_range(runner):
    result = runner.invoke(cli, ["selftest", "--min-length", "9", "--max-length", "5"])
    assert result.exit_code == 2


def test_empty_salt_env_matches_generator_from_env(runner, monkeypatch):
    from legitid.ids import IdGenerator

    monkeypatch.setenv("LEGITID_SALT", "")
    identifier = IdGenerator.from_env().generate()

    result = runner.invoke(cli, ["verify", identifier], env={"LEGITID_SALT": ""})

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "valid"
