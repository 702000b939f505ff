"""
cinex.reports.generator - Jinja2-based report generator.

Produces self-contained HTML reports with embedded CSS. Templates get
filters for the numeric formats used across reports: ``duration``
(M:SS.ss), ``fixed`` (two decimals) and ``vec`` (comma-separated vector).
"""

from __future__ import annotations

import webbrowser
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from cinex.utils import format_duration

TEMPLATE_DIR = Path(__file__).parent / "templates"


def format_fixed(value: float, places: int = 2) -> str:
    return f"{value:.{places}f}"


def format_vec(values: Iterable[float], places: int = 2) -> str:
    return ", ".join(format_fixed(v, places) for v in values)


class ReportGenerator:
    """Jinja2-based HTML report generator."""

    def __init__(self, template_dir: Path | None = None):
        self.env = Environment(
            loader=FileSystemLoader(template_dir or TEMPLATE_DIR),
            autoescape=select_autoescape(["html", "xml"]),
        )
        self.env.filters["duration"] = format_duration
        self.env.filters["fixed"] = format_fixed
        self.env.filters["vec"] = format_vec

    def render_string(self, template_name: str, data: dict[str, Any]) -> str:
        template = self.env.get_template(template_name)
        return template.render(**data)

    def render(
        self,
        template_name: str,
        data: dict[str, Any],
        output_path: Path,
    ) -> Path:
        """Render a report template to an HTML file.

        Args:
            template_name: Name of the template file
            data: Template variables
            output_path: Path to write the HTML file

        Returns:
            Path to the generated file
        """
        html = self.render_string(template_name, data)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")

        return output_path

    def open_in_browser(self, path: Path) -> None:
        webbrowser.open(path.resolve().as_uri())
