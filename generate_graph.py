#!/usr/bin/env python3
"""Entry point for generating a random GFA graph fixture.

Usage:
    python generate_graph.py -n 100 -e 300 --ensure-strongly-connected -s 42
    python generate_graph.py -n 100 -e 300 -o fixture.gfa --log-level trace
"""

from gfagen.cli import main

if __name__ == "__main__":
    main()
