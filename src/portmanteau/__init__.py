"""Public package surface exposing the blend engine, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: the blend engine and word-pair helpers
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config
from .domain.blending import MIN_WORD_SIZE, blend, diagnose
from .domain.enums import RejectionReason, VowelPolicy

__all__ = [
    "MIN_WORD_SIZE",
    "RejectionReason",
    "VowelPolicy",
    "blend",
    "diagnose",
    "get_config",
    "print_info",
]
