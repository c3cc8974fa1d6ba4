"""Recursive-descent parser for the GraphViz dot language."""

from __future__ import annotations

from typing import List

from dotlayout.ast import (
    ArrowKind,
    AttributeList,
    AttrStmt,
    AttrStmtTarget,
    EdgeStmt,
    Graph,
    NodeId,
    NodeStmt,
    Stmt,
)
from dotlayout.lexer import Lexer, Token, TokenKind


class ParseError(ValueError):
    """Raised when the input is not a valid dot file."""


_ATTR_TARGETS = {
    TokenKind.GRAPH_KW: AttrStmtTarget.GRAPH,
    TokenKind.NODE_KW: AttrStmtTarget.NODE,
    TokenKind.EDGE_KW: AttrStmtTarget.EDGE,
}

_EDGE_TOKENS = {
    TokenKind.ARROW_LINE: ArrowKind.LINE,
    TokenKind.ARROW_RIGHT: ArrowKind.ARROW,
}


class DotParser:
    """Parses dot source text into a :class:`Graph`."""

    def __init__(self, text: str) -> None:
        self._lexer = Lexer(text)
        self.tok = Token(TokenKind.COLON)

    def print_error(self) -> None:
        """Print the input around the point where lexing stopped."""
        self._lexer.print_error()

    def lex(self) -> None:
        """Advance to the next token."""
        if self.tok.kind is TokenKind.ERROR:
            raise ParseError("can't parse after error")
        if self.tok.kind is TokenKind.EOF:
            raise ParseError("can't parse after EOF")
        self.tok = self._lexer.next_token()

    def _is(self, kind: TokenKind) -> bool:
        return self.tok.kind is kind

    def _expect(self, kind: TokenKind, message: str) -> None:
        if not self._is(kind):
            raise ParseError(message)
        self.lex()

    def _take_identifier(self, message: str) -> str:
        if not self._is(TokenKind.IDENTIFIER):
            raise ParseError(message)
        text = self.tok.text
        self.lex()
        return text

    def parse_graph(self, is_subgraph: bool) -> Graph:
        """graph : [strict] (graph | digraph) [ID] '{' stmt_list '}'
        subgraph : subgraph [ID] '{' stmt_list '}'
        """
        graph = Graph("")
        if is_subgraph:
            self._expect(TokenKind.SUBGRAPH_KW, "Expected 'subgraph'")
        else:
            if self._is(TokenKind.STRICT_KW):
                self.lex()
            if self.tok.kind not in (
                TokenKind.GRAPH_KW,
                TokenKind.DIGRAPH_KW,
                TokenKind.SUBGRAPH_KW,
            ):
                raise ParseError("Expected (graph|digraph)")
            self.lex()

        if self._is(TokenKind.IDENTIFIER):
            graph.name = self.tok.text
            self.lex()

        self._expect(TokenKind.OPEN_BRACE, "Expected '{'")
        graph.stmts = self.parse_stmt_list()
        return graph

    def parse_stmt_list(self) -> List[Stmt]:
        """stmt_list : [stmt [';'] stmt_list], consuming the closing brace."""
        stmts: List[Stmt] = []
        while True:
            if self._is(TokenKind.SEMICOLON):
                self.lex()
            if self._is(TokenKind.CLOSE_BRACE):
                self.lex()
                return stmts
            stmts.append(self.parse_stmt())

    def parse_stmt(self) -> Stmt:
        """stmt : node_stmt | edge_stmt | attr_stmt | ID '=' ID | subgraph"""
        kind = self.tok.kind
        if kind is TokenKind.IDENTIFIER:
            node_id = self.parse_node_id()
            following = self.tok.kind
            if following in _EDGE_TOKENS:
                return self.parse_edge_stmt(node_id)
            if following is TokenKind.EQUAL:
                return self.parse_attribute_stmt(node_id)
            if following in (TokenKind.IDENTIFIER, TokenKind.CLOSE_BRACE):
                return NodeStmt(node_id)
            if following is TokenKind.SEMICOLON:
                self.lex()
                return NodeStmt(node_id)
            if following is TokenKind.OPEN_BRACKET:
                return NodeStmt(node_id, self.parse_attr_list())
            raise ParseError("Unsupported token")

        if kind is TokenKind.SUBGRAPH_KW:
            return self.parse_graph(True)

        if kind in _ATTR_TARGETS:
            self.lex()
            return AttrStmt(_ATTR_TARGETS[kind], self.parse_attr_list())

        if kind is TokenKind.OPEN_BRACE:
            self.lex()
            return Graph("anonymous", self.parse_stmt_list())

        raise ParseError("Unknown token")

    def parse_attr_list(self) -> AttributeList:
        """attr_list : '[' [a_list] ']'"""
        self._expect(TokenKind.OPEN_BRACKET, "Expected '['")
        attrs = AttributeList()
        while not self._is(TokenKind.CLOSE_BRACKET):
            prop = self._take_identifier("Expected property name")
            self._expect(TokenKind.EQUAL, "Expected '='")
            value = self._take_identifier("Expected value after assignment")
            attrs.add_attr(prop, value)
            if self._is(TokenKind.SEMICOLON):
                self.lex()
            if self._is(TokenKind.COMMA):
                self.lex()
        self._expect(TokenKind.CLOSE_BRACKET, "Expected ']'")
        return attrs

    def parse_attribute_stmt(self, node_id: NodeId) -> AttrStmt:
        """ID '=' ID, a graph attribute."""
        if node_id.port is not None:
            raise ParseError("Can't assign into a port")
        self._expect(TokenKind.EQUAL, "Expected '='")
        value = self._take_identifier("Expected identifier.")
        return AttrStmt(AttrStmtTarget.GRAPH, AttributeList([(node_id.name, value)]))

    def parse_edge_stmt(self, node_id: NodeId) -> EdgeStmt:
        """edge_stmt : node_id edgeRHS [attr_list]"""
        edge = EdgeStmt(node_id)
        while self.tok.kind in _EDGE_TOKENS:
            arrow = _EDGE_TOKENS[self.tok.kind]
            self.lex()
            edge.insert(self.parse_node_id(), arrow)
        if self._is(TokenKind.OPEN_BRACKET):
            edge.attrs = self.parse_attr_list()
        return edge

    def parse_node_id(self) -> NodeId:
        """node_id : ID [':' ID]"""
        name = self._take_identifier("Expected a node name")
        if self._is(TokenKind.COLON):
            self.lex()
            port = self._take_identifier("Expected a port name")
            return NodeId(name, port)
        return NodeId(name)

    def process(self) -> Graph:
        """Parse a whole dot file."""
        self.lex()
        graph = self.parse_graph(False)
        if self._is(TokenKind.EOF):
            return graph
        raise ParseError("Unexpected content at the end of the file.")