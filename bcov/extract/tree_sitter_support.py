"""
Tree-sitter infrastructure for bundle extraction.
Provides grammar loading, named query management and offset helpers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from tree_sitter import Language, Node, Parser, Query, QueryCursor, Tree

from .offsets import Utf16Offsets


class TreeSitterDocument(ABC):
    """
    Wrapper for Tree-sitter parsed document with query system.
    """

    def __init__(self, text: str):
        self.text = text
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode("utf-8", "surrogatepass")
        self._query_cache: Dict[str, Query] = {}
        self._offsets: Optional[Utf16Offsets] = None
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for queries.

        Returns:
            Language instance
        """
        pass

    @abstractmethod
    def get_query_definitions(self) -> Dict[str, str]:
        """
        Get named query definitions for this language.

        Returns:
            Dict mapping query names to query strings
        """
        pass

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = Parser(self.get_language())
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Args:
            query_name: Name of the query to execute

        Returns:
            List of (node, capture_name) tuples

        Raises:
            ValueError: If query is not defined for this language
        """
        root_node = self.root_node

        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        cursor = QueryCursor(self._query_cache[query_name])

        results = []
        for _pattern_index, captures in cursor.matches(root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))

        return results

    def query_nodes(self, query_name: str, capture_name: str) -> List[Node]:
        """
        Execute a named query and return nodes of one capture, ordered by position.
        """
        nodes = [node for node, cap in self.query(query_name) if cap == capture_name]
        return sorted(nodes, key=lambda n: n.start_byte)

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8", "surrogatepass")

    def get_node_range(self, node: Node) -> Tuple[int, int]:
        """Get UTF-16 range for a node (units used by coverage profiles)."""
        return self.to_offset(node.start_byte), self.to_offset(node.end_byte)

    def to_offset(self, byte_pos: int) -> int:
        if self._offsets is None:
            self._offsets = Utf16Offsets(self.text)
        return self._offsets.to_utf16(byte_pos)

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    @staticmethod
    def named_children_of(node: Node, *, skip: Tuple[str, ...] = ("comment",)) -> List[Node]:
        """Named children of a node without comments."""
        return [child for child in node.named_children if child.type not in skip]
