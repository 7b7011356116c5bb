"""GFA 1.0 line formatting for header, segment, and link records."""

from gfagen.graph.types import EdgeRecord, NodeRecord

HEADER_LINE = "H\tVN:Z:1.0"
OVERLAP = "0M"  # every link is a zero-length overlap
ORIENTATIONS = ("+", "-")


def format_header() -> str:
    return HEADER_LINE


def format_segment(node: NodeRecord) -> str:
    """S<tab>id<tab>sequence"""
    return f"S\t{node.node_id}\t{node.sequence}"


def format_link(edge: EdgeRecord) -> str:
    """L<tab>from<tab>from_sign<tab>to<tab>to_sign<tab>0M"""
    return (
        f"L\t{edge.from_id}\t{edge.from_sign}"
        f"\t{edge.to_id}\t{edge.to_sign}\t{OVERLAP}"
    )
