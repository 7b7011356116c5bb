"""Graph generation: header, nodes, then edges onto a single sink.

The phases run strictly in order and share one random stream, so the
stream position at each phase (and therefore the whole output) is fixed by
the seed and the GraphSpec:

    Validated -> HeaderWritten -> NodesWritten -> (CycleWritten)?
              -> RandomEdgesWritten -> Done

The first error aborts the run. Lines already written are not rolled back.
"""

import io
import logging
from typing import TextIO

from gfagen.config.spec import GraphSpec
from gfagen.graph.edges import cycle_edges, random_edges
from gfagen.graph.gfa import format_header, format_link, format_segment
from gfagen.graph.nodes import generate_nodes
from gfagen.graph.types import GenerationSummary
from gfagen.reproducibility.seed import make_rng, resolve_seed

log = logging.getLogger(__name__)

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def write_graph(spec: GraphSpec, sink: TextIO) -> GenerationSummary:
    """Write a complete GFA graph for spec to sink.

    Args:
        spec: Validated graph specification.
        sink: Writable text stream, owned by the caller.

    Returns:
        GenerationSummary with the seed used and the line counts written.

    Raises:
        ConfigurationError: If random edges are requested over zero nodes.
        OSError: If writing to the sink fails.
    """
    seed = resolve_seed(spec.seed)
    rng = make_rng(seed)

    log.log(TRACE, "Writing header")
    sink.write(format_header() + "\n")

    log.log(TRACE, "Writing nodes")
    node_lines = 0
    for node in generate_nodes(spec.node_count, rng):
        sink.write(format_segment(node) + "\n")
        node_lines += 1

    log.log(TRACE, "Writing edges")
    cycle_lines = 0
    if spec.cycle_edge_count:
        log.log(TRACE, "Ensuring strong connectivity by creating a cycle through all nodes")
        for edge in cycle_edges(spec.node_count):
            sink.write(format_link(edge) + "\n")
            cycle_lines += 1
        log.log(TRACE, "Writing remaining edges")

    random_lines = 0
    for edge in random_edges(spec.node_count, spec.random_edge_count, rng):
        sink.write(format_link(edge) + "\n")
        random_lines += 1

    summary = GenerationSummary(
        seed=seed,
        node_lines=node_lines,
        cycle_edge_lines=cycle_lines,
        random_edge_lines=random_lines,
    )
    log.info(
        "Graph written: nodes=%d, edges=%d (cycle=%d, random=%d), seed=%d",
        summary.node_lines,
        summary.edge_lines,
        summary.cycle_edge_lines,
        summary.random_edge_lines,
        summary.seed,
    )
    return summary


def generate_graph_text(spec: GraphSpec) -> str:
    """Render a whole graph to a string. Convenient for small fixtures."""
    buf = io.StringIO()
    write_graph(spec, buf)
    return buf.getvalue()
