# Call visitor: walk a Swift syntax tree, find calls to the configured function,
# and classify each one by its required labelled argument.

from __future__ import annotations

import logging
from typing import Iterator, Optional

from tree_sitter import Node as TSNode
from tree_sitter import Tree

from nslint.config import LinterConfig, get_default_config
from nslint.context import get_source_span
from nslint.findings.models import DiagnosticKind, Finding

logger = logging.getLogger(__name__)


def _walk(node: TSNode) -> Iterator[TSNode]:
    """Yield node and every descendant in document order (pre-order DFS)."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def _value_arguments(call_node: TSNode) -> list[TSNode]:
    """Return the value_argument nodes of a call_expression, in declaration order."""
    arguments: list[TSNode] = []
    for suffix in call_node.children:
        if suffix.type != "call_suffix":
            continue
        for group in suffix.children:
            if group.type != "value_arguments":
                continue
            arguments.extend(c for c in group.named_children if c.type == "value_argument")
    return arguments


class CallVisitor:
    """
    Collects a Finding for every call to config.function_name in a tree.

    Only bare identifiers are matched (`NSLocalizedString(...)`, not
    `Foo.NSLocalizedString(...)`). The whole tree is always visited, so a call
    nested inside the arguments of another call gets its own finding.
    """

    def __init__(self, config: LinterConfig | None = None) -> None:
        self.config = config or get_default_config()

    def visit(self, tree: Tree | TSNode, source: bytes) -> list[Finding]:
        root = tree.root_node if isinstance(tree, Tree) else tree
        findings: list[Finding] = []
        for node in _walk(root):
            if node.type != "call_expression":
                continue
            finding = self.visit_call(node, source)
            if finding is not None:
                findings.append(finding)
        logger.debug("Visitor found %d call(s) to %s", len(findings), self.config.function_name)
        return findings

    def called_name(self, call_node: TSNode, source: bytes) -> Optional[str]:
        """Return the callee's name when it is a bare identifier, else None."""
        if call_node.child_count == 0:
            return None
        callee = call_node.child(0)
        if callee is None or callee.type != "simple_identifier":
            return None
        return get_source_span(source, callee).strip()

    def find_labelled_argument(self, call_node: TSNode, source: bytes) -> Optional[TSNode]:
        """Return the first argument labelled config.parameter_label, if any."""
        for argument in _value_arguments(call_node):
            label = argument.child_by_field_name("name")
            if label is not None and get_source_span(source, label).strip() == self.config.parameter_label:
                return argument
        return None

    def visit_call(self, call_node: TSNode, source: bytes) -> Optional[Finding]:
        """Classify a single call_expression, or return None if it calls something else."""
        if self.called_name(call_node, source) != self.config.function_name:
            return None

        argument = self.find_labelled_argument(call_node, source)
        if argument is None:
            return Finding(kind=DiagnosticKind.MISSING_REQUIRED_ARGUMENT, offset=call_node.start_byte)

        value = argument.child_by_field_name("value")
        value_text = get_source_span(source, value).strip() if value is not None else ""
        if value_text not in self.config.accepted_values:
            logger.debug("Rejected %s value %r", self.config.parameter_label, value_text)
            return Finding(kind=DiagnosticKind.INVALID_REQUIRED_ARGUMENT_VALUE, offset=argument.start_byte)

        return Finding(kind=DiagnosticKind.VALID, offset=call_node.start_byte)
