"""GFA graph generation: records, emitters, formatting, and sink."""

from gfagen.graph.edges import cycle_edges, random_edges
from gfagen.graph.generator import TRACE, generate_graph_text, write_graph
from gfagen.graph.gfa import (
    HEADER_LINE,
    ORIENTATIONS,
    OVERLAP,
    format_header,
    format_link,
    format_segment,
)
from gfagen.graph.nodes import generate_nodes
from gfagen.graph.sequences import (
    MAX_SEQUENCE_LENGTH,
    MIN_SEQUENCE_LENGTH,
    NUCLEOTIDES,
    random_dna_string,
)
from gfagen.graph.sink import STDOUT_SENTINEL, open_sink
from gfagen.graph.types import EdgeRecord, GenerationSummary, NodeRecord

__all__ = [
    "EdgeRecord",
    "GenerationSummary",
    "HEADER_LINE",
    "MAX_SEQUENCE_LENGTH",
    "MIN_SEQUENCE_LENGTH",
    "NUCLEOTIDES",
    "NodeRecord",
    "ORIENTATIONS",
    "OVERLAP",
    "STDOUT_SENTINEL",
    "TRACE",
    "cycle_edges",
    "format_header",
    "format_link",
    "format_segment",
    "generate_graph_text",
    "generate_nodes",
    "open_sink",
    "random_dna_string",
    "random_edges",
]
