# Tree-sitter setup and AST parsing: parse Swift source code into syntax trees.

import logging
from pathlib import Path
from typing import Optional

import tree_sitter
from tree_sitter import Language
from tree_sitter_swift import language as _swift_language_capsule

logger = logging.getLogger(__name__)

# Swift grammar: wrap the tree-sitter-swift capsule for use with tree_sitter.Parser
_SWIFT_LANGUAGE = Language(_swift_language_capsule())


def get_swift_language() -> Language:
    """Return the Tree-sitter Language object for Swift."""
    return _SWIFT_LANGUAGE


def create_parser() -> tree_sitter.Parser:
    """Create and return a Tree-sitter Parser configured for Swift."""
    return tree_sitter.Parser(_SWIFT_LANGUAGE)


def parse_bytes(
    source: bytes,
    parser: Optional[tree_sitter.Parser] = None,
) -> tree_sitter.Tree:
    """
    Parse Swift source bytes into a syntax tree.

    Parsing never raises on malformed input: tree-sitter recovers and marks
    the damaged regions with ERROR or MISSING nodes, which the call visitor
    simply never matches.

    Args:
        source: UTF-8 encoded Swift source code.
        parser: Optional parser instance; if None, a new one is created.

    Returns:
        The parse tree. Check tree.root_node.has_error for recovered errors;
        callers that know the file name report them.
    """
    if parser is None:
        parser = create_parser()
    tree = parser.parse(source)
    logger.debug(
        "Parse %s: root=%s",
        "completed with errors" if tree.root_node.has_error else "succeeded",
        tree.root_node.type,
    )
    return tree


def parse_file(path: Path, parser: Optional[tree_sitter.Parser] = None) -> Optional[tree_sitter.Tree]:
    """
    Parse a Swift source file into a syntax tree.

    Returns:
        The parse tree, or None if the file could not be read.
    """
    try:
        source = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read file %s: %s", path, e)
        return None
    tree = parse_bytes(source, parser=parser)
    logger.info("Parsed file %s: success=%s", path, not tree.root_node.has_error)
    return tree
