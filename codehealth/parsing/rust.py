from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

import tree_sitter_rust
from tree_sitter import Language, Parser

from codehealth.parsing.syntax import (
    FunctionDefinition,
    ParsedSource,
    ParseError,
    SourceParser,
    Statement,
    StatementKind,
)


RUST_LANGUAGE = Language(tree_sitter_rust.language())


@dataclass(frozen=True)
class LanguageSpec:
    name: str
    extensions: set[str]
    function_node_types: set[str]
    block_node_types: set[str]
    statement_wrapper_types: set[str]
    non_statement_types: set[str]
    conditional_types: set[str]
    match_types: set[str]
    loop_types: set[str]
    comment_types: set[str]
    operand_types: set[str]


RUST_SPEC = LanguageSpec(
    name="rust",
    extensions={".rs"},
    function_node_types={"function_item"},
    block_node_types={"block"},
    statement_wrapper_types={"expression_statement"},
    non_statement_types={
        "line_comment",
        "block_comment",
        "attribute_item",
        "inner_attribute_item",
        "label",
    },
    # if_let_expression / while_let_expression come from older grammar releases.
    conditional_types={"if_expression", "if_let_expression"},
    match_types={"match_expression"},
    loop_types={"while_expression", "while_let_expression", "for_expression"},
    comment_types={"line_comment", "block_comment"},
    operand_types={
        "identifier",
        "field_identifier",
        "type_identifier",
        "shorthand_field_identifier",
        "primitive_type",
        "integer_literal",
        "float_literal",
        "string_literal",
        "raw_string_literal",
        "char_literal",
        "boolean_literal",
        "lifetime",
        "metavariable",
        "self",
        "super",
        "crate",
    },
)


def iter_nodes(node) -> Iterable[object]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def node_text(source: bytes, node) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


class RustParser(SourceParser):
    """Parses Rust source with tree-sitter into the statement model."""

    name = "rust"
    extensions = (".rs",)

    def __init__(self, spec: LanguageSpec = RUST_SPEC) -> None:
        self.spec = spec
        self._parser = Parser(RUST_LANGUAGE)

    def parse(self, path: str, source: str) -> ParsedSource:
        data = source.encode("utf-8")
        tree = self._parser.parse(data)
        root = tree.root_node
        if root.has_error:
            raise ParseError(path, self._describe_error(root))
        functions = tuple(
            self._function(data, node)
            for node in root.named_children
            if node.type in self.spec.function_node_types
        )
        operators, operands = self._halstead_tokens(data, root)
        return ParsedSource(
            path=path,
            functions=functions,
            operators=operators,
            operands=operands,
        )

    def _function(self, source: bytes, node) -> FunctionDefinition:
        name_node = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        return FunctionDefinition(
            name=node_text(source, name_node) if name_node is not None else "<anonymous>",
            body=self._block_statements(body) if body is not None else (),
            start_line=node.start_point[0] + 1,
        )

    def _block_statements(self, block) -> Tuple[Statement, ...]:
        return tuple(
            self._statement(child)
            for child in block.named_children
            if child.type not in self.spec.non_statement_types
        )

    def _statement(self, node) -> Statement:
        expression = self._outermost_expression(node)
        kind = self._kind(expression)
        if kind is StatementKind.BLOCK:
            return Statement(kind, self._block_statements(expression))
        children = tuple(
            statement
            for block in self._nested_blocks(expression)
            for statement in self._block_statements(block)
        )
        return Statement(kind, children)

    def _outermost_expression(self, node):
        if node.type not in self.spec.statement_wrapper_types:
            return node
        for child in node.named_children:
            if child.type not in self.spec.comment_types:
                return child
        return node

    def _kind(self, node) -> StatementKind:
        if node.type in self.spec.conditional_types:
            return StatementKind.CONDITIONAL
        if node.type in self.spec.match_types:
            return StatementKind.MATCH
        if node.type in self.spec.loop_types:
            return StatementKind.LOOP
        if node.type in self.spec.block_node_types:
            return StatementKind.BLOCK
        return StatementKind.OTHER

    def _nested_blocks(self, node) -> Iterator[object]:
        # Outermost blocks below ``node``; their own statements carry the rest.
        stack = list(reversed(node.children))
        while stack:
            current = stack.pop()
            if current.type in self.spec.block_node_types:
                yield current
                continue
            stack.extend(reversed(current.children))

    def _halstead_tokens(self, source: bytes, root) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        operators: List[str] = []
        operands: List[str] = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type in self.spec.comment_types:
                continue
            if node.type in self.spec.operand_types:
                operands.append(node_text(source, node))
                continue
            if node.child_count == 0:
                text = node_text(source, node)
                if text:
                    operators.append(text)
                continue
            stack.extend(reversed(node.children))
        return tuple(operators), tuple(operands)

    def _describe_error(self, root) -> str:
        for node in iter_nodes(root):
            if node.type == "ERROR" or node.is_missing:
                line, column = node.start_point[0] + 1, node.start_point[1] + 1
                if node.is_missing:
                    return f"missing {node.type} at line {line}, column {column}"
                return f"syntax error at line {line}, column {column}"
        return "syntax error"
