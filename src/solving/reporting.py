"""
ReportGenerator - Write run reports as JSON and Markdown.
"""

from pathlib import Path
from typing import Dict
import json
import logging

from .runner import RunReport

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Generate run reports in multiple formats."""

    def __init__(self, output_dir: str):
        """
        Initialize the report generator.

        Args:
            output_dir: Directory to save reports
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate_all(self, report: RunReport) -> Dict[str, Path]:
        """
        Generate all report formats.

        Returns:
            Dict with paths to generated files
        """
        return {
            "json": self.generate_json(report),
            "markdown": self.generate_markdown(report),
        }

    def _stem(self, report: RunReport) -> str:
        safe_timestamp = report.timestamp.replace(":", "-").replace(".", "-")
        return f"run_{safe_timestamp}"

    def generate_json(self, report: RunReport) -> Path:
        """Export the report as JSON."""
        output_path = self.output_dir / f"{self._stem(report)}.json"

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)

        logger.info(f"JSON report saved to {output_path}")
        return output_path

    def generate_markdown(self, report: RunReport) -> Path:
        """Export the report as a Markdown table."""
        output_path = self.output_dir / f"{self._stem(report)}.md"

        lines = [
            "# Advent of Code 2020 Answers",
            "",
            f"**Timestamp:** {report.timestamp}",
            f"**Total time:** {report.total_elapsed_ms:.2f} ms",
            "",
            "| Day | Title | Part | Answer | Time (ms) |",
            "|-----|-------|------|--------|-----------|",
        ]
        for day in report.days:
            for part in day.parts:
                lines.append(
                    f"| {day.day} | {day.title} | {part.part} | {part.answer} | {part.elapsed_ms:.2f} |"
                )
        lines.append("")

        output_path.write_text("\n".join(lines), encoding="utf-8")

        logger.info(f"Markdown report saved to {output_path}")
        return output_path
