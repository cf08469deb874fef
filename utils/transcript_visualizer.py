# utils/transcript_visualizer.py

import os
from typing import TYPE_CHECKING, Optional

from graphviz import Digraph

from utils.logger import get_logger

if TYPE_CHECKING:
    from core.outcome import Outcome
    from utils.transcript import Transcript

logger = get_logger(__name__)

VISUALIZATION_OUTPUT_FOLDER = "transcript_visualizations"

VERDICT_COLORS = {"DONE": "palegreen", "HALT": "lightcoral", "CONTINUE": "lightgrey"}


def build_transcript_graph(transcript: 'Transcript', outcome: Optional['Outcome'] = None,
                           fmt: str = "png") -> Digraph:
    """
    Builds a left-to-right chain of turns: one node per subject call, labelled
    with the stimulus and the reactions it produced, followed by a verdict
    node when an outcome is given.
    """
    dot = Digraph(comment="Judgment transcript", format=fmt)
    dot.attr(rankdir="LR", nodesep="0.4", ranksep="0.5")

    dot.node("START", "start", shape="circle", style="filled", fillcolor="lightskyblue", fontsize="10")
    previous = "START"

    for entry in transcript:
        node_id = f"T{entry.call}"
        reactions = "\\n".join(str(r) for r in entry.reactions) or "(silent)"
        label = f"#{entry.call}\\n{entry.stimulus}\\n→ {reactions}"
        fill = "white" if entry.reactions else "whitesmoke"
        dot.node(node_id, label, shape="box", style="rounded,filled", fillcolor=fill, fontsize="10")
        dot.edge(previous, node_id)
        previous = node_id

    if outcome is not None:
        kind = outcome.verdict.kind.name
        label = f"{outcome.verdict}\\ncalls: {outcome.calls}"
        dot.node("VERDICT", label, shape="box", style="filled",
                 fillcolor=VERDICT_COLORS.get(kind, "white"), fontsize="12")
        dot.edge(previous, "VERDICT", style="dashed")

    return dot


def render_transcript(transcript: 'Transcript', base_filename: str, outcome: Optional['Outcome'] = None,
                      fmt: str = "png") -> Optional[str]:
    """
    Renders the transcript graph into VISUALIZATION_OUTPUT_FOLDER.

    Returns:
        Path of the rendered file, or None if the directory could not be created.
    """
    if not os.path.exists(VISUALIZATION_OUTPUT_FOLDER):
        try:
            os.makedirs(VISUALIZATION_OUTPUT_FOLDER)
            logger.info(f"Created directory for transcript visualizations: {VISUALIZATION_OUTPUT_FOLDER}")
        except OSError as e:
            logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}")
            return None

    output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
    dot = build_transcript_graph(transcript, outcome, fmt)
    rendered = dot.render(output_path, cleanup=True)
    logger.info(f"Transcript visualization saved to {rendered}")
    return rendered
