"""Graph specification with validation, loading, and fingerprinting."""

from gfagen.config.spec import ConfigurationError, GraphSpec
from gfagen.config.serialization import spec_from_dict, spec_hash, spec_to_json

__all__ = [
    "ConfigurationError",
    "GraphSpec",
    "spec_from_dict",
    "spec_hash",
    "spec_to_json",
]
