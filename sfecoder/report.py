"""Rendering of the code table / metrics report.

The text report is produced from a Jinja2 template shipped next to this
module (``templates/report.txt.jinja``). A JSON-friendly dictionary view is
available for machine consumption.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import logging

import jinja2

from sfecoder.coding.builder import CodeTable
from sfecoder.config import Config
from sfecoder.redundancy import Metrics


_LOGGER = logging.getLogger(__name__)


def _fixed_filter(value: float, precision: int = Config.REPORT_PRECISION) -> str:
    """Format ``value`` with ``precision`` decimals."""

    return f"{float(value):.{int(precision)}f}"


class ReportRenderer:
    def __init__(self, template_dir: Path | None = None) -> None:
        base = template_dir if template_dir is not None else Path(__file__).parent / "templates"
        self._template_dir = Path(base)
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(self._template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self._env.filters["fixed"] = _fixed_filter

    def render(
        self,
        table: CodeTable,
        metrics: Metrics,
        *,
        precision: int = Config.REPORT_PRECISION,
        template_name: str = Config.TEMPLATE_NAME,
        show_entropy: bool = False,
    ) -> str:
        template = self._env.get_template(template_name)
        rows = [{"symbol": s, "codeword": c} for s, c in zip(table.symbols, table.codewords)]
        _LOGGER.debug("Rendering %s for %d symbols", template_name, len(rows))
        return template.render(rows=rows, metrics=metrics, precision=precision, show_entropy=show_entropy)


_DEFAULT_RENDERER: ReportRenderer | None = None


def render_report(
    table: CodeTable,
    metrics: Metrics,
    *,
    precision: int = Config.REPORT_PRECISION,
    show_entropy: bool = False,
) -> str:
    """Render the default text report for ``table`` and ``metrics``.

    ``show_entropy`` appends the source entropy line.
    """

    global _DEFAULT_RENDERER
    if _DEFAULT_RENDERER is None:
        _DEFAULT_RENDERER = ReportRenderer()
    return _DEFAULT_RENDERER.render(table, metrics, precision=precision, show_entropy=show_entropy)


def report_to_dict(table: CodeTable, metrics: Metrics) -> dict[str, Any]:
    """Return the report content as a JSON-serializable mapping."""

    return {
        "codewords": [
            {"symbol": s, "probability": float(p), "codeword": c, "length": int(n)}
            for s, p, c, n in zip(table.symbols, table.probabilities, table.codewords, table.word_lengths)
        ],
        "metrics": metrics.to_dict(),
    }


__all__ = ["ReportRenderer", "render_report", "report_to_dict"]
