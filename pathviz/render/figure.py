"""
Plotly renderer: the graph as a figure with animation overlays.

The renderer keeps the overlay state the interpreter drives and builds a
fresh go.Figure on demand, so it can be snapshotted mid-run or written to
HTML once the animation has terminated.
"""

from __future__ import annotations

import logging
from pathlib import Path

import plotly.graph_objects as go

from pathviz.animation.renderer import Element, Renderer
from pathviz.animation.state import Highlight, Termination
from pathviz.config import (
    FIGURE_EDGE_WIDTH,
    FIGURE_NODE_SIZE,
    FIGURE_OVERLAY_WIDTH,
    OVERLAY_COLORS,
)
from pathviz.graph.model import Edge, Graph, Node

logger = logging.getLogger(__name__)


class FigureRenderer(Renderer):
    """
    Draws a Graph and its overlays with plotly.

    Attributes:
        graph: Graph being drawn
        overlay: Elements drawn over the plain graph, in drawing order
        title: Figure title, updated with the termination once finished
    """

    def __init__(self, graph: Graph, title: str = "Graph"):
        self.graph = graph
        self.overlay: list[tuple[Element, Highlight]] = []
        self.title = title
        self.frames = 0

    def draw(self, element: Element) -> None:
        self.overlay.append((element, Highlight.NEUTRAL))
        self.frames += 1

    def highlight(self, element: Element, color: Highlight) -> None:
        self.overlay.append((element, color))

    def redraw_all(self) -> None:
        self.overlay = []
        self.frames += 1

    def on_finish(self, termination: Termination, cost: int | None) -> None:
        suffix = f", cost {cost}" if cost is not None else ""
        self.title = f"{self.title} ({termination.value}{suffix})"

    # -------------------------------------------------------------------------
    # Figure building
    # -------------------------------------------------------------------------

    def to_figure(self) -> go.Figure:
        """Build a figure of the graph with the current overlays on top."""
        fig = go.Figure()

        for edge in self.graph.edges:
            fig.add_trace(_edge_trace(edge, edge.color, FIGURE_EDGE_WIDTH))

        for element, color in self.overlay:
            if isinstance(element, Edge):
                fig.add_trace(_edge_trace(element, OVERLAY_COLORS[color.value], FIGURE_OVERLAY_WIDTH))

        fig.add_trace(_node_trace(self.graph.nodes, [self._node_color(n) for n in self.graph.nodes]))

        for edge in self.graph.edges:
            fig.add_annotation(
                x=edge.target.x,
                y=edge.target.y,
                ax=edge.source.x,
                ay=edge.source.y,
                xref="x",
                yref="y",
                axref="x",
                ayref="y",
                showarrow=True,
                arrowhead=2,
                arrowsize=1.2,
                standoff=FIGURE_NODE_SIZE / 2,
                arrowcolor=edge.color,
                text="",
            )
            fig.add_annotation(
                x=(edge.source.x + edge.target.x) / 2,
                y=(edge.source.y + edge.target.y) / 2,
                text=str(edge.cost),
                showarrow=False,
                font=dict(size=10),
                bgcolor="white",
            )

        fig.update_layout(
            title=self.title,
            showlegend=False,
            height=560,
            margin=dict(t=45, b=20, l=20, r=20),
            plot_bgcolor="white",
        )
        fig.update_xaxes(visible=False)
        fig.update_yaxes(visible=False, autorange="reversed", scaleanchor="x")
        return fig

    def write_html(self, path: Path | str) -> Path:
        """Write the current figure to an HTML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_figure().write_html(str(path))
        logger.info(f"Figure written to {path}")
        return path

    def _node_color(self, node: Node) -> str:
        color = node.color
        for element, highlight in self.overlay:
            if element is node:
                color = OVERLAY_COLORS[highlight.value]
        return color


def _edge_trace(edge: Edge, color: str, width: float) -> go.Scatter:
    return go.Scatter(
        x=[edge.source.x, edge.target.x],
        y=[edge.source.y, edge.target.y],
        mode="lines",
        line=dict(color=color, width=width),
        hoverinfo="skip",
    )


def _node_trace(nodes: list[Node], colors: list[str]) -> go.Scatter:
    """Scatter of node markers; start and finish get a heavier outline."""
    return go.Scatter(
        x=[n.x for n in nodes],
        y=[n.y for n in nodes],
        mode="markers+text",
        text=[n.label for n in nodes],
        textfont=dict(color="white", size=12),
        marker=dict(
            size=FIGURE_NODE_SIZE,
            color=colors,
            line=dict(
                color="black",
                width=[3 if n.is_start or n.is_finish else 1 for n in nodes],
            ),
        ),
        hovertemplate="<b>%{text}</b> (%{x}, %{y})<extra></extra>",
    )
