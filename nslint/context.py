# Per-file analysis context: store display name, source bytes, syntax tree, and helpers.
# Handles reading/parsing Swift files and isolating unreadable files so a
# directory scan never stops on one bad entry.

import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter import Node as TSNode
from tree_sitter import Parser, Tree

from nslint.parser import create_parser, parse_bytes

logger = logging.getLogger(__name__)


def _count_nodes(node: TSNode) -> int:
    """Count all descendants of node (including node itself)."""
    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(current.children)
    return count


class SourceUnit:
    """
    One source buffer to analyse: display name, raw bytes, and syntax tree.

    The visitor reads unit.tree and unit.source; the location resolver builds
    its offset map from unit.source.
    """

    def __init__(
        self,
        display_name: str,
        source: bytes,
        tree: Tree,
        *,
        has_parse_errors: bool = False,
    ) -> None:
        self.display_name = display_name
        self.source = source
        self.tree = tree
        self.has_parse_errors = has_parse_errors

    @property
    def root_node(self) -> TSNode:
        """Convenience access to the tree root."""
        return self.tree.root_node

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")


def get_source_span(source: bytes, node: TSNode) -> str:
    """
    Return the substring of source for the given node's byte range.

    Decodes with errors="replace" so bad UTF-8 does not crash.
    """
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def create_unit(
    source: Union[str, bytes],
    display_name: str = "<stdin>",
    parser: Optional[Parser] = None,
) -> SourceUnit:
    """Parse in-memory source text into a SourceUnit. Never fails."""
    if isinstance(source, str):
        source = source.encode("utf-8")
    tree = parse_bytes(source, parser=parser)
    has_errors = tree.root_node.has_error
    if has_errors:
        logger.warning("%s parsed with syntax errors; tree may be incomplete", display_name)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed %s: %d nodes", display_name, _count_nodes(tree.root_node))
    return SourceUnit(display_name, source, tree, has_parse_errors=has_errors)


def create_context(
    path: Path,
    parser: Optional[Parser] = None,
) -> Optional[SourceUnit]:
    """
    Read a Swift file and parse it into a SourceUnit named after the path.

    - Unreadable file (permission, missing, directory): returns None and logs error.
    - Malformed Swift: still returns a SourceUnit with has_parse_errors=True.
    """
    try:
        source = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read file %s: %s", path, e)
        return None
    unit = create_unit(source, str(path), parser=parser)
    logger.info("Parsed %s%s", path, " (with parse errors)" if unit.has_parse_errors else "")
    return unit


def load_contexts(
    paths: list[Path],
    parser: Optional[Parser] = None,
) -> list[SourceUnit]:
    """
    Read and parse multiple Swift files into SourceUnits.

    Unreadable or missing files are skipped (logged). Order matches input
    order; failed files are omitted.
    """
    if parser is None:
        parser = create_parser()

    units: list[SourceUnit] = []
    for path in paths:
        unit = create_context(path, parser=parser)
        if unit is not None:
            units.append(unit)
    return units
