"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from profilecheck import __version__
from profilecheck.cli import app
from profilecheck.core.exporter import load_report

runner = CliRunner()

ENV = {
    "PROFILECHECK_RATE_LIMIT_INTERVAL_MS": "0",
    "PROFILECHECK_LOG_LEVEL": "CRITICAL",
}

SNAPSHOT = {
    "username": "lucia.fit",
    "fullName": "Lucía",
    "followersCount": 50000,
    "biography": "atleta de Madrid, entrenamiento diario #fitness",
    "latestPosts": [{"caption": "workout day", "likesCount": 2000, "commentsCount": 100}],
}

CRITERIA_ARGS = [
    "--niche", "fitness",
    "--location", "Spain",
    "--min-followers", "10000",
    "--max-followers", "500000",
]


@pytest.fixture
def snapshots(tmp_path):
    directory = tmp_path / "snapshots"
    directory.mkdir()
    (directory / "lucia.fit.json").write_text(json.dumps(SNAPSHOT), encoding="utf-8")
    return directory


class TestVersion:
    """Test the --version flag."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"profilecheck version {__version__}" in result.output


class TestCheck:
    """Test identifier validation without fetching."""

    def test_all_valid(self):
        result = runner.invoke(app, ["check", "natgeo", "https://www.instagram.com/nasa/"])
        assert result.exit_code == 0
        assert "natgeo" in result.output

    def test_invalid_identifier_fails(self):
        result = runner.invoke(app, ["check", "natgeo", "https://www.instagram.com/p/CxYz123/"])
        assert result.exit_code == 1

    def test_platform_option(self):
        result = runner.invoke(app, ["check", "@charlidamelio", "--platform", "tiktok"])
        assert result.exit_code == 0


class TestVerify:
    """Test verification from snapshot files."""

    def test_snapshots_required_for_source_platforms(self):
        result = runner.invoke(app, ["verify", "lucia.fit"], env=ENV)
        assert result.exit_code == 1
        assert "--snapshots is required for instagram" in result.output

    def test_invalid_criteria(self, snapshots):
        args = ["verify", "lucia.fit", "-s", str(snapshots), "--min-age", "40", "--max-age", "20"]
        result = runner.invoke(app, args, env=ENV)
        assert result.exit_code == 1
        assert "Invalid criteria" in result.output

    def test_writes_report(self, snapshots, tmp_path):
        out = tmp_path / "report.json"
        args = ["verify", "lucia.fit", "ghost", "-s", str(snapshots), "-o", str(out), *CRITERIA_ARGS]

        result = runner.invoke(app, args, env=ENV)

        assert result.exit_code == 0, result.output
        report = load_report(out)
        first, second = report.results
        assert first.verified is True
        assert first.overall_score == 76
        assert first.extracted_data.display_name == "Lucía"
        assert second.errors == ["Failed to scrape profile data"]
        assert report.summary.total_profiles == 2
        assert "Verified 1/2 profiles" in result.output

    def test_json_output(self, snapshots):
        args = ["verify", "lucia.fit", "-s", str(snapshots), "--json", *CRITERIA_ARGS]

        result = runner.invoke(app, args, env=ENV)

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["results"][0]["profile_identifier"] == "lucia.fit"
        assert data["summary"]["verified_profiles"] == 1

    def test_snapshots_not_supported_for_twitter(self, snapshots):
        result = runner.invoke(app, ["verify", "nasa", "-p", "twitter", "-s", str(snapshots)], env=ENV)
        assert result.exit_code == 1
        assert "No source-backed adapter for: twitter" in result.output
