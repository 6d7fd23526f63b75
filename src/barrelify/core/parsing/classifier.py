"""Export classifiers for script, typed script and component modules.

Each classifier parses one module with a tree-sitter grammar and walks the
top-level statement list only. Exports are sorted into three buckets:

- ``named``: exported variable, function, class, enum and namespace bindings
- ``types``: exported type aliases, interfaces and ``export type { ... }`` lists
- ``has_default``: presence of any ``export default`` statement

Anything else at top level (imports, plain statements, non-exported
declarations, ``export { a }`` clauses, ``export * from``, default and
namespace re-exports) is ignored.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import ClassVar, Final, override

import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser

from barrelify.exceptions import SourceParseError
from barrelify.types.models import ExportSet, ExportSetBuilder

logger = logging.getLogger(__name__)

TYPE_DECLARATIONS: Final[frozenset[str]] = frozenset({
    "type_alias_declaration",
    "interface_declaration",
})

VARIABLE_DECLARATIONS: Final[frozenset[str]] = frozenset({
    "lexical_declaration",
    "variable_declaration",
})

# Declarations that bind a single value name through their ``name`` field
NAMED_DECLARATIONS: Final[frozenset[str]] = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_signature",
    "class_declaration",
    "abstract_class_declaration",
    "enum_declaration",
    "internal_module",
    "module",
})

IDENTIFIER_NODES: Final[frozenset[str]] = frozenset({
    "identifier",
    "type_identifier",
    "shorthand_property_identifier_pattern",
})

# `export Name from "mod"` and its comma forms (`export Name, { a } from`,
# `export Name, * as ns from`). The grammars have no rule for a default
# re-export, and it contributes nothing to a barrel, so it is blanked out
# before parsing. `export default from` is left for the parser to reject.
DEFAULT_REEXPORT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""
    ^[ \t]*export[ \t]+
    (?!(?:default|type)\b)[A-Za-z_$][\w$]*
    (?:
        \s*,\s*\*\s*as\s+[A-Za-z_$][\w$]*\s+
      | \s*,\s*\{[^{}]*\}\s*
      | \s+
    )
    from\s*(?:'[^'\n]*'|"[^"\n]*")[ \t]*;?
    """,
    re.MULTILINE | re.VERBOSE,
)


def _blank_default_reexports(source: str) -> str:
    """Replace default re-export statements with spaces, keeping line breaks."""

    def blank(match: re.Match[str]) -> str:
        logger.debug(f"Skipping default re-export: {match.group().strip()}")
        return re.sub(r"[^\n]", " ", match.group())

    return DEFAULT_REEXPORT_PATTERN.sub(blank, source)


def _node_text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")


def _declared_name(node: Node | None) -> str | None:
    """Return the identifier a declaration binds, if it binds a plain one."""
    if node is None:
        return None
    if node.type in IDENTIFIER_NODES:
        return _node_text(node)
    if node.type == "nested_identifier":
        # namespace A.B {} binds A
        return _node_text(node).split(".", 1)[0].strip()
    return None


def _bound_names(pattern: Node | None) -> list[str]:
    """Collect identifiers bound by a declarator target, left to right.

    Handles plain identifiers as well as object and array destructuring,
    defaults and rest elements.
    """
    names: list[str] = []
    pending: list[Node] = [pattern] if pattern is not None else []

    while pending:
        node = pending.pop()
        kind = node.type
        if kind in IDENTIFIER_NODES:
            names.append(_node_text(node))
        elif kind == "pair_pattern":
            value = node.child_by_field_name("value")
            if value is not None:
                pending.append(value)
        elif kind in {"assignment_pattern", "object_assignment_pattern"}:
            left = node.child_by_field_name("left")
            if left is not None:
                pending.append(left)
        elif kind in {"object_pattern", "array_pattern", "rest_pattern"}:
            pending.extend(reversed(node.named_children))

    return names


def _find_syntax_error(root: Node) -> Node | None:
    """Return the first error or missing node in document order."""
    pending: list[Node] = [root]
    while pending:
        node = pending.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            pending.extend(reversed(node.children))
    return None


class ExportClassifier(ABC):
    """Abstract base class for module export classification.

    One concrete classifier exists per accepted source dialect; the
    registry dispatches to them by file extension.
    """

    extensions: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def classify(self, source: str, filename: str) -> ExportSet:
        """Classify the top-level exports of one module.

        Args:
            source: Module source text
            filename: File name, used in diagnostics only

        Returns:
            Classified exports; empty when the module exports nothing

        Raises:
            SourceParseError: If the source does not parse cleanly
        """
        pass

    def get_description(self) -> str:
        return f"{type(self).__name__} ({', '.join(self.extensions)})"


class TreeSitterClassifier(ExportClassifier):
    """Classifier backed by a tree-sitter grammar.

    The parser is created lazily on first use and reused for every file of
    the run.
    """

    def __init__(self) -> None:
        self._parser: Parser | None = None

    @abstractmethod
    def load_language(self) -> Language:
        """Return the tree-sitter language for this dialect."""
        pass

    @property
    def parser(self) -> Parser:
        if self._parser is None:
            self._parser = Parser(self.load_language())
            logger.debug(f"Created parser for {self.get_description()}")
        return self._parser

    @override
    def classify(self, source: str, filename: str) -> ExportSet:
        tree = self.parser.parse(_blank_default_reexports(source).encode("utf-8"))
        root = tree.root_node

        if root.has_error:
            error_node = _find_syntax_error(root)
            detail = None
            if error_node is not None:
                row, column = error_node.start_point
                detail = f"syntax error at line {row + 1}, column {column + 1}"
            raise SourceParseError(filename, detail)

        builder = ExportSetBuilder()
        for statement in root.named_children:
            if statement.type == "export_statement":
                self._classify_export(statement, builder)

        return builder.build()

    def _classify_export(self, statement: Node, builder: ExportSetBuilder) -> None:
        keywords = {child.type for child in statement.children if not child.is_named}

        if "default" in keywords:
            builder.mark_default()
            return

        declaration = statement.child_by_field_name("declaration")
        if declaration is not None:
            self._classify_declaration(declaration, builder)
            return

        # export type { A, B as C } [from '...']
        if "type" in keywords:
            for clause in statement.named_children:
                if clause.type == "export_clause":
                    self._classify_type_clause(clause, builder)

    def _classify_declaration(self, declaration: Node, builder: ExportSetBuilder) -> None:
        kind = declaration.type

        if kind == "ambient_declaration":
            for inner in declaration.named_children:
                if inner.type in TYPE_DECLARATIONS | VARIABLE_DECLARATIONS | NAMED_DECLARATIONS:
                    self._classify_declaration(inner, builder)
                    return
            return

        if kind in TYPE_DECLARATIONS:
            name = _declared_name(declaration.child_by_field_name("name"))
            if name:
                builder.add_type(name)
        elif kind in VARIABLE_DECLARATIONS:
            for declarator in declaration.named_children:
                if declarator.type == "variable_declarator":
                    for name in _bound_names(declarator.child_by_field_name("name")):
                        builder.add_named(name)
        elif kind in NAMED_DECLARATIONS:
            name = _declared_name(declaration.child_by_field_name("name"))
            if name:
                builder.add_named(name)
        else:
            logger.debug(f"Ignoring exported declaration of kind {kind}")

    def _classify_type_clause(self, clause: Node, builder: ExportSetBuilder) -> None:
        for specifier in clause.named_children:
            if specifier.type != "export_specifier":
                continue
            exported = specifier.child_by_field_name("alias") or specifier.child_by_field_name("name")
            name = _declared_name(exported)
            if name:
                builder.add_type(name)


class ScriptClassifier(TreeSitterClassifier):
    """Plain script modules; the grammar covers JSX, decorators and class fields."""

    extensions: ClassVar[tuple[str, ...]] = (".js", ".jsx")

    @override
    def load_language(self) -> Language:
        return Language(tsjavascript.language())


class TypedScriptClassifier(TreeSitterClassifier):
    """Typed script modules with interfaces and type aliases."""

    extensions: ClassVar[tuple[str, ...]] = (".ts",)

    @override
    def load_language(self) -> Language:
        return Language(tstypescript.language_typescript())


class ComponentClassifier(TreeSitterClassifier):
    """Typed component modules mixing type annotations and JSX elements."""

    extensions: ClassVar[tuple[str, ...]] = (".tsx",)

    @override
    def load_language(self) -> Language:
        return Language(tstypescript.language_tsx())
