"""Markdown report of the current statistics."""

import logging
from datetime import datetime
from pathlib import Path

from core.file_handler import FileHandlerError
from core.stats_engine import AnalysisConfig, DerivedStats

logger = logging.getLogger(__name__)


def render_report(
    stats: DerivedStats,
    config: AnalysisConfig,
    generated_at: datetime | None = None,
) -> str:
    generated_at = generated_at or datetime.now()
    chars_label = "Characters (excluding spaces)" if config.exclude_spaces else "Characters"

    lines = [
        "# Text Statistics",
        "",
        f"_Generated {generated_at:%Y-%m-%d %H:%M}_",
        "",
        f"- **{chars_label}:** {stats.char_count}",
        f"- **Words:** {stats.word_count}",
        f"- **Sentences:** {stats.sentence_count}",
        f"- **Approx. reading time:** {stats.reading_time}",
    ]
    if config.char_limit is not None:
        status = "exceeded" if stats.exceeds_limit else "within limit"
        lines.append(f"- **Character limit:** {config.char_limit} ({status})")

    lines += ["", "## Letter Density", ""]
    if stats.letter_frequencies:
        lines += ["| Letter | Count | Share |", "|---|---:|---:|"]
        lines += [
            f"| {s.letter.upper()} | {s.count} | {s.percentage} |"
            for s in stats.letter_frequencies
        ]
    else:
        lines.append("No letters found.")
    return "\n".join(lines) + "\n"


def write_report(stats: DerivedStats, config: AnalysisConfig, path: Path) -> None:
    """Write the report for *stats* to *path* as UTF-8 Markdown.

    Raises:
        FileHandlerError: If the destination cannot be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_report(stats, config), encoding="utf-8")
    except OSError as exc:
        raise FileHandlerError(f"Cannot write report: {exc}") from exc
    logger.info("Wrote statistics report: %s", path)
