"""Unit tests for report export."""

import json
from datetime import datetime

from profilecheck.core.exporter import load_report, save_report, to_dict, to_json
from profilecheck.core.scoring import degraded_result
from profilecheck.core.summary import summarize
from profilecheck.models.request import Platform, VerificationRequest
from profilecheck.models.result import VerificationReport


def make_report() -> VerificationReport:
    request = VerificationRequest(profile_identifier="@someone", platform=Platform.TIKTOK)
    results = [degraded_result(request, "Failed to scrape profile data", datetime(2026, 3, 1, 9, 30))]
    return VerificationReport(
        results=results,
        summary=summarize(results),
        generated_at=datetime(2026, 3, 1, 9, 31),
    )


class TestExporter:
    """Test JSON export helpers."""

    def test_to_json(self):
        data = json.loads(to_json(make_report()))
        assert data["summary"]["total_profiles"] == 1
        assert data["results"][0]["platform"] == "tiktok"
        assert data["results"][0]["errors"] == ["Failed to scrape profile data"]

    def test_to_dict_json_compatible(self):
        data = to_dict(make_report().results[0])
        assert data["scraped_at"] == "2026-03-01T09:30:00"
        assert data["match_analysis"]["follower_validation"]["quality"] == "low"

    def test_save_and_load(self, tmp_path):
        report = make_report()
        path = save_report(report, tmp_path / "out" / "report.json")

        assert path.exists()
        assert load_report(path) == report
