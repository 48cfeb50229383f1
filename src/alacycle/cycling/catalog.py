#!/usr/bin/env python3
"""
ALACYCLE ANCHOR CATALOG - Phase 1 (Parse)
-----------------------------------------
Walks the YAML event stream of the config and records every anchor
declaration in the order the parser meets it. Only declarations count:
`&name` on a scalar, mapping or sequence. `*name` aliases are skipped.

Duplicate declarations are kept, one entry per declaration, so the list
mirrors the parser's discovery exactly.

Author: Alacycle Team
Date: 2026-10-19
"""

from typing import Iterator, List, Tuple

# External Dependencies
from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.events import AliasEvent, NodeEvent

from alacycle.core.errors import MalformedDocument


def _discover(document_text: str) -> List[Tuple[int, str]]:
    """Returns (discovery_index, name) for every anchor declaration."""
    yaml = YAML(typ='rt')
    found = []
    index = 0
    try:
        for event in yaml.parse(document_text):
            if not isinstance(event, NodeEvent) or isinstance(event, AliasEvent):
                continue
            if event.anchor:
                found.append((index, str(event.anchor)))
                index += 1
    except YAMLError as e:
        raise MalformedDocument(str(e)) from e
    return found


def extract_anchors(document_text: str) -> List[str]:
    """
    Parses the document and returns its anchor names in declaration order.

    Raises:
        MalformedDocument: the text is not valid YAML.
    """
    discovered = sorted(_discover(document_text), key=lambda item: item[0])
    return [name for _, name in discovered]


class AnchorCatalog:
    """Read-only view of the anchors declared in one document."""

    def __init__(self, names: List[str]):
        self.names = list(names)

    @classmethod
    def from_text(cls, document_text: str) -> "AnchorCatalog":
        return cls(extract_anchors(document_text))

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def position(self, name: str) -> int:
        """Index of the first declaration of `name`, or -1."""
        try:
            return self.names.index(name)
        except ValueError:
            return -1
