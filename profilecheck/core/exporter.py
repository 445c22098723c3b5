"""Export utilities for verification results and reports."""

from pathlib import Path

from profilecheck.models.result import VerificationReport, VerificationResult


def to_json(report: VerificationReport | VerificationResult, indent: int = 2) -> str:
    """
    Convert a report or single result to a JSON string.

    Args:
        report: VerificationReport or VerificationResult to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return report.model_dump_json(indent=indent)


def to_dict(result: VerificationResult | VerificationReport) -> dict:
    """JSON-compatible dictionary (datetimes as ISO strings, enums as values)."""
    return result.model_dump(mode="json")


def save_report(
    report: VerificationReport,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save a report to a JSON file, creating parent directories.

    Args:
        report: VerificationReport to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(report, indent=indent), encoding="utf-8")
    return path


def load_report(filepath: str | Path) -> VerificationReport:
    """Load a report previously written by `save_report`."""
    path = Path(filepath)
    return VerificationReport.model_validate_json(path.read_text(encoding="utf-8"))
