from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ats_checker.analysis.scorer import describe_score, score_tone
from ats_checker.models.analysis import Priority, ResumeAnalysis

REPORT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def render_report(analysis: ResumeAnalysis, role_name: str) -> str:
    """Render an analysis result to a standalone HTML page."""
    env = Environment(
        loader=FileSystemLoader(str(REPORT_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
    )
    template = env.get_template("report.html")
    return template.render(
        analysis=analysis,
        role_name=role_name,
        description=describe_score(analysis.score),
        tone=score_tone(analysis.score),
        high=Priority.HIGH,
    )


def save_report(html_content: str, output_path: str | Path) -> Path:
    """Save HTML content to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html_content, encoding="utf-8")
    return path
