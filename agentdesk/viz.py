"""
agentdesk.viz
=============

Plotting helper for the status summary produced by
:pymeth:`agentdesk.service.AgentService.status_summary`.  Used by the
``/api/agents/status/summary/chart`` endpoint and handy in notebooks.
"""
from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Any, Dict

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from .models import AgentStatus  # noqa: E402


def _draw(summary: Dict[str, Any]):
    counts = summary["statusCounts"]
    pcts = summary["statusPercentages"]
    labels = list(AgentStatus.values())
    ys = [counts.get(s, 0) for s in labels]

    fig, ax = plt.subplots()
    bars = ax.bar(labels, ys, color="#2b9348", edgecolor="#333")
    # count and share on top of each bar
    for rect, label, cnt in zip(bars, labels, ys):
        ax.text(rect.get_x() + rect.get_width() / 2,
                cnt + 0.05,
                f"{cnt} ({pcts.get(label, 0)}%)",
                ha="center", va="bottom",
                fontsize=8, color="#333")
    ax.grid(axis="y", linestyle=":", alpha=0.3)
    ax.set_title(f"Agent Status ({summary['totalAgents']} total)")
    ax.set_ylabel("Agent Count")
    fig.tight_layout()
    return fig


def status_chart_png(summary: Dict[str, Any]) -> bytes:
    """Render the summary as a bar chart and return the PNG bytes."""
    fig = _draw(summary)
    buf = io.BytesIO()
    try:
        fig.savefig(buf, format="png", dpi=120, bbox_inches="tight")
    finally:
        plt.close(fig)
    return buf.getvalue()


def save_status_chart(summary: Dict[str, Any], out_path: str | os.PathLike) -> Path:
    """
    Write the bar chart to *out_path* (parent folders auto-created).

    Returns
    -------
    pathlib.Path
        Final image path for convenience.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(status_chart_png(summary))
    return out_path
