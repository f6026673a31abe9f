"""Rendering of analysis reports."""

from typing import Any

from textconvert.core.analysis import readability_level
from textconvert.core.models import AnalysisReport
from textconvert.reports.helpers import format_bar, format_report_header


def report_to_dict(report: AnalysisReport) -> dict[str, Any]:
    """Plain dict with camelCase keys, ready for JSON or YAML."""
    data = report.model_dump(mode="json", by_alias=True)
    data["readabilityLevel"] = readability_level(report.readability_score)
    return data


def format_analysis_report(report: AnalysisReport, title: str = "Text Analysis") -> str:
    """Human-readable analysis report."""
    lines = [format_report_header(title)]
    lines.append(f"Characters:               {report.characters}")
    lines.append(f"Characters (no spaces):   {report.characters_no_spaces}")
    lines.append(f"Words:                    {report.words}")
    lines.append(f"Sentences:                {report.sentences}")
    lines.append(f"Paragraphs:               {report.paragraphs}")
    lines.append(f"Avg words per sentence:   {report.average_words_per_sentence}")
    lines.append(f"Avg word length:          {report.avg_word_length}")
    lines.append(f"Reading time:             {report.reading_time_minutes} min")
    lines.append(
        f"Readability:              {report.readability_score}/100 "
        f"({readability_level(report.readability_score)})"
    )
    lines.append(f"Complexity:               {report.text_complexity.value}")

    if report.most_common_words:
        lines.append("")
        lines.append("Most common words:")
        top = report.most_common_words[0].count
        for entry in report.most_common_words:
            lines.append(f"  {entry.word:<20} {entry.count:>5}  {format_bar(entry.count, top)}")

    if report.character_frequency:
        lines.append("")
        lines.append("Character frequency:")
        top = report.character_frequency[0].count
        for entry in report.character_frequency:
            lines.append(f"  {entry.char:<20} {entry.count:>5}  {format_bar(entry.count, top)}")

    return "\n".join(lines) + "\n"
