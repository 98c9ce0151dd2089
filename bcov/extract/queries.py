"""
Tree-sitter query definitions for JavaScript bundles.
"""

from __future__ import annotations

QUERIES = {
    # Объект регистрации модулей в чанке webpack:
    #   (self.webpackChunk = self.webpackChunk || []).push([[ids], { "./a.js": function (...) {...} }])
    "module_registry": """
    (program
      (expression_statement
        (call_expression
          arguments: (arguments
            (array
              (object) @registry)))))
    """,
}
