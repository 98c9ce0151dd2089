"""
Извлечение границ модулей из чанка webpack.

Ищется объект регистрации модулей — первый объект внутри массива,
переданного в вызов на верхнем уровне программы:

    (self.webpackChunk = self.webpackChunk || []).push([[179], {
        "./src/index.js": function (module, exports, require) { ... },
        "./node_modules/lodash/map.js": (module) => { ... },
    }]);

Для каждого свойства берётся интервал тела функции: от начала первого
оператора до конца последнего. Пустое тело даёт интервал самого блока.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from tree_sitter import Language, Node

from ..coverage.model import ModuleInterval
from .tree_sitter_support import TreeSitterDocument

_LOG = logging.getLogger("bcov.extract")

_FUNCTION_TYPES = {
    "function_expression",
    "function",  # старые версии грамматики
    "arrow_function",
    "generator_function",
}


class BundleDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())

    def get_query_definitions(self) -> Dict[str, str]:
        from .queries import QUERIES
        return QUERIES

    def find_registry(self) -> Optional[Node]:
        """Первый по позиции объект регистрации модулей или None."""
        nodes = self.query_nodes("module_registry", "registry")
        return nodes[0] if nodes else None


def extract_modules(text: str) -> Optional[List[ModuleInterval]]:
    """
    Возвращает интервалы модулей бандла, отсортированные по началу,
    или None, если объект регистрации модулей не найден.
    """
    doc = BundleDocument(text)
    if doc.has_error():
        _LOG.debug("Bundle has syntax errors, extraction is best-effort")

    registry = doc.find_registry()
    if registry is None:
        return None

    modules: List[ModuleInterval] = []
    for prop in doc.named_children_of(registry):
        interval = _module_interval(doc, prop)
        if interval is not None:
            modules.append(interval)

    modules.sort(key=lambda mi: mi.start)
    return modules


def _module_interval(doc: BundleDocument, prop: Node) -> Optional[ModuleInterval]:
    if prop.type == "pair":
        key = prop.child_by_field_name("key")
        value = prop.child_by_field_name("value")
        body = value.child_by_field_name("body") if value is not None and value.type in _FUNCTION_TYPES else None
    elif prop.type == "method_definition":
        key = prop.child_by_field_name("name")
        body = prop.child_by_field_name("body")
    else:
        _LOG.debug("Skipping registry entry of type %s", prop.type)
        return None

    if key is None:
        return None
    name = _key_name(doc, key)
    if body is None:
        _LOG.debug("Skipping module %s: value is not a function", name)
        return None

    _LOG.debug("Processing module %s", name)

    statements = doc.named_children_of(body) if body.type == "statement_block" else []
    if statements:
        start = doc.to_offset(statements[0].start_byte)
        end = doc.to_offset(statements[-1].end_byte)
    else:
        start, end = doc.get_node_range(body)

    return ModuleInterval(name=name, start=start, end=end)


def _key_name(doc: BundleDocument, key: Node) -> str:
    text = doc.get_node_text(key)
    if key.type == "string" and len(text) >= 2:
        return text[1:-1]
    return text


__all__ = ["BundleDocument", "extract_modules"]
