"""
Plain-text rendering of an AnalysisReport for the command line.
"""

from sieve.contexts.scoring.score_data_structure import AnalysisReport
from sieve.utils.report_formatter import Column, TableFormatter, format_percentage
from sieve.utils.text_processing import truncate_display

REPORT_WIDTH = 80


def format_analysis_report(report: AnalysisReport) -> str:
    """
    Render an AnalysisReport as a readable text report.

    Sections: headline scores, extracted contact details, experience and
    education tables, skills, suggestions, insights, keywords and section
    coverage.
    """
    record = report.extracted_data
    info = record.personal_info
    score_label = "Match score" if report.has_job_description else "ATS score"

    out = TableFormatter([], total_width=REPORT_WIDTH)
    out.add_section_header("CV ANALYSIS")
    out.add_text(f"{score_label}: {report.match_score}")
    out.add_text(f"Completeness: {report.completeness_score}/100")
    out.add_text(f"Looks like a CV: {'yes' if report.is_cv else 'no'}")
    out.add_blank_line()

    out.add_section_header("CONTACT")
    for label, value in (
        ("Name", info.name),
        ("Email", info.email),
        ("Phone", info.phone),
        ("LinkedIn", info.linkedin),
    ):
        out.add_text(f"{label + ':':<10} {value or '-'}")
    if record.summary:
        out.add_blank_line()
        out.add_text(f"Summary: {truncate_display(record.summary, REPORT_WIDTH - 9)}")
    out.add_blank_line()

    lines = [out.render()]

    experience = TableFormatter(
        [Column("Title", 28), Column("Company", 26), Column("Duration", 24)],
        total_width=REPORT_WIDTH,
    )
    experience.add_section_header(f"EXPERIENCE ({len(record.experience)})")
    experience.add_table_header()
    for entry in record.experience:
        experience.add_row(
            [
                truncate_display(entry.title, 28),
                truncate_display(entry.company, 26),
                truncate_display(entry.duration, 24),
            ]
        )
    experience.add_blank_line()
    lines.append(experience.render())

    education = TableFormatter(
        [Column("Degree", 40), Column("Institution", 30), Column("Year", 8)],
        total_width=REPORT_WIDTH,
    )
    education.add_section_header(f"EDUCATION ({len(record.education)})")
    education.add_table_header()
    for entry in record.education:
        education.add_row(
            [truncate_display(entry.degree, 40), truncate_display(entry.institution, 30), entry.year]
        )
    education.add_blank_line()
    lines.append(education.render())

    details = TableFormatter([], total_width=REPORT_WIDTH)
    details.add_section_header(f"SKILLS ({len(record.skills)})")
    details.add_text(f"  {', '.join(record.skills) or '(none)'}")
    details.add_blank_line()

    details.add_section_header("SUGGESTIONS")
    details.add_bullets(report.suggestions)
    details.add_blank_line()

    details.add_section_header("INSIGHTS")
    details.add_bullets(
        [
            f"[{insight.type.value}] {insight.title}: {insight.message}"
            for insight in report.insights
        ]
    )
    details.add_blank_line()

    if report.has_job_description:
        details.add_section_header("KEYWORDS")
        details.add_text(f"  Matching: {', '.join(report.matching_keywords) or '(none)'}")
        details.add_text(f"  Missing:  {', '.join(report.missing_keywords) or '(none)'}")
        details.add_blank_line()

    details.add_text(f"Top keywords: {', '.join(report.top_keywords) or '(none)'}")
    details.add_blank_line()
    lines.append(details.render())

    scores = report.section_scores
    coverage = TableFormatter(
        [
            Column("Section", 16),
            Column("Present", 9),
            Column("Score", 7, ">"),
            Column("Weight", 7, ">"),
        ],
        total_width=REPORT_WIDTH,
    )
    coverage.add_section_header(
        f"SECTION COVERAGE: {scores.total_score}/{scores.max_possible_score} "
        f"({format_percentage(scores.total_score, scores.max_possible_score)})"
    )
    coverage.add_table_header()
    for name, row in scores.sections.items():
        coverage.add_row([name, "yes" if row.present else "no", row.score, row.weight])
    lines.append(coverage.render())

    return "\n".join(lines)
