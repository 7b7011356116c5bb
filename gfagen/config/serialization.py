"""Building a GraphSpec from parsed arguments, and fingerprinting it."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from gfagen.config.spec import GraphSpec


def spec_from_dict(d: dict[str, Any]) -> GraphSpec:
    """Type-check raw values and build a validated GraphSpec.

    dacite rejects unknown keys and values of the wrong type (a string
    count, a float seed); GraphSpec then applies its own range and
    connectivity checks.
    """
    return from_dict(
        data_class=GraphSpec,
        data=d,
        config=DaciteConfig(check_types=True, strict=True),
    )


def spec_to_json(spec: GraphSpec) -> str:
    """Canonical JSON for a spec: sorted keys, so equal specs render equally."""
    return json.dumps(asdict(spec), indent=2, sort_keys=True)


def spec_hash(spec: GraphSpec) -> str:
    """16 hex chars of SHA-256 over the canonical JSON.

    Equal specs with a seed produce byte-identical graphs, so the hash
    names a fixture.
    """
    return hashlib.sha256(spec_to_json(spec).encode("ascii")).hexdigest()[:16]
