"""Java frontend building resolved syntax trees with tree-sitter."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Sequence

from fluxhover.core.config import MatcherSettings, load_config
from fluxhover.core.logging import Logger, get_logger

from .document import TextDocument
from .errors import FrontendUnavailableError
from .syntax import CallNode, ExpressionNode, MethodBinding, NameNode, SyntaxNode

__all__ = ["JavaTreeBuilder", "ParsedSource"]

_LANGUAGE = "java"
_IGNORED_NODES = {"comment", "line_comment", "block_comment"}
_NAME_NODES = {"identifier", "scoped_identifier", "field_access"}


@dataclass(frozen=True, slots=True)
class ParsedSource:
    """Resolved tree for one source file plus its coordinate service."""

    root: SyntaxNode
    document: TextDocument
    errors: tuple[str, ...] = ()


@dataclass(slots=True)
class _Imports:
    """Names made visible by a compilation unit's package and imports."""

    package: str | None = None
    types: dict[str, str] = field(default_factory=dict)
    type_packages: list[str] = field(default_factory=list)
    static_members: dict[str, str] = field(default_factory=dict)
    static_types: list[str] = field(default_factory=list)


def _load_parser() -> Any:
    try:
        from tree_sitter_languages import get_parser  # type: ignore[import]
    except Exception as exc:  # pragma: no cover - dependency missing
        raise FrontendUnavailableError(
            "Java frontend requires tree_sitter_languages."
        ) from exc

    try:
        return get_parser(_LANGUAGE)
    except Exception as exc:  # pragma: no cover - grammar load failure
        raise FrontendUnavailableError(
            f"tree-sitter parser for {_LANGUAGE!r} is unavailable: {exc}"
        ) from exc


def _byte_offsets(text: str) -> Sequence[int]:
    """Return cumulative UTF-8 byte offsets for ``text``."""

    offsets = [0]
    total = 0
    for char in text:
        total += len(char.encode("utf-8"))
        offsets.append(total)
    return offsets


def _dotted(raw: bytes) -> str:
    return "".join(raw.decode("utf-8").split())


class JavaTreeBuilder:
    """Parse Java source into a :class:`SyntaxNode` tree with call bindings.

    Bindings are resolved from the compilation unit's imports and the known
    signature table in :class:`MatcherSettings`; this is deliberately not a
    type checker. Calls whose declaring type cannot be determined keep a
    ``None`` binding.
    """

    def __init__(
        self,
        settings: MatcherSettings | None = None,
        *,
        logger: Logger | None = None,
    ) -> None:
        self._settings = settings or load_config().matcher
        self._logger = logger or get_logger(__name__, frontend=_LANGUAGE)
        self._parser: Any | None = None

    def parse(self, text: str, *, uri: str | None = None) -> ParsedSource:
        """Return the resolved tree and document for ``text``.

        Raises:
            FrontendUnavailableError: If tree-sitter cannot be loaded.
        """

        if self._parser is None:
            self._parser = _load_parser()

        source_bytes = text.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        document = TextDocument(text, uri=uri)

        errors: tuple[str, ...] = ()
        if tree.root_node.has_error:
            errors = ("tree-sitter reported syntax errors",)
            self._logger.warning(
                "Java source contains syntax errors",
                uri=uri,
            )

        converter = _TreeConverter(
            settings=self._settings,
            source_bytes=source_bytes,
            byte_offsets=(
                None if len(source_bytes) == len(text) else _byte_offsets(text)
            ),
        )
        root = converter.convert(tree.root_node)
        return ParsedSource(root=root, document=document, errors=errors)


class _TreeConverter:
    """Translate tree-sitter nodes into resolved syntax nodes."""

    def __init__(
        self,
        *,
        settings: MatcherSettings,
        source_bytes: bytes,
        byte_offsets: Sequence[int] | None,
    ) -> None:
        self._settings = settings
        self._source = source_bytes
        self._byte_offsets = byte_offsets
        self._imports = _Imports()

    def convert(self, root: Any) -> SyntaxNode:
        self._collect_imports(root)
        return self._build(root)

    # ------------------------------------------------------------------
    # Imports
    # ------------------------------------------------------------------
    def _collect_imports(self, root: Any) -> None:
        for child in root.named_children:
            if child.type == "package_declaration":
                name = self._first_name(child)
                if name is not None:
                    self._imports.package = name
            elif child.type == "import_declaration":
                self._add_import(child)

    def _add_import(self, node: Any) -> None:
        child_types = {child.type for child in node.children}
        name = self._first_name(node)
        if name is None:
            return
        is_static = "static" in child_types
        on_demand = "asterisk" in child_types

        if is_static and on_demand:
            self._imports.static_types.append(name)
        elif is_static:
            declaring, _, member = name.rpartition(".")
            if declaring:
                self._imports.static_members[member] = declaring
        elif on_demand:
            self._imports.type_packages.append(name)
        else:
            simple = name.rpartition(".")[2]
            self._imports.types[simple] = name

    def _first_name(self, node: Any) -> str | None:
        for child in node.named_children:
            if child.type in ("identifier", "scoped_identifier"):
                return _dotted(child.text)
        return None

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------
    def _build(self, node: Any) -> SyntaxNode:
        start, length = self._span(node)
        if node.type == "method_invocation":
            return self._build_call(node, start, length)
        if node.type == "identifier":
            return NameNode(
                identifier=node.text.decode("utf-8"),
                start=start,
                length=length,
            )
        return ExpressionNode(
            kind=node.type,
            start=start,
            length=length,
            children=tuple(
                self._build(child)
                for child in node.named_children
                if child.type not in _IGNORED_NODES
            ),
        )

    def _build_call(self, node: Any, start: int, length: int) -> CallNode:
        object_node = node.child_by_field_name("object")
        receiver = self._build(object_node) if object_node is not None else None

        arguments: tuple[SyntaxNode, ...] = ()
        argument_list = node.child_by_field_name("arguments")
        if argument_list is not None:
            arguments = tuple(
                self._build(child)
                for child in argument_list.named_children
                if child.type not in _IGNORED_NODES
            )

        name_node = node.child_by_field_name("name")
        binding = None
        if name_node is not None:
            binding = self._resolve(
                name_node.text.decode("utf-8"), object_node, receiver
            )

        return CallNode(
            binding=binding,
            arguments=arguments,
            start=start,
            length=length,
            receiver=receiver,
            name_start=(
                self._char_offset(name_node.start_byte)
                if name_node is not None
                else None
            ),
        )

    def _span(self, node: Any) -> tuple[int, int]:
        start = self._char_offset(node.start_byte)
        end = self._char_offset(node.end_byte)
        return start, end - start

    def _char_offset(self, byte_offset: int) -> int:
        if self._byte_offsets is None:
            return byte_offset
        return bisect_left(self._byte_offsets, byte_offset)

    # ------------------------------------------------------------------
    # Binding resolution
    # ------------------------------------------------------------------
    def _resolve(
        self,
        name: str,
        object_node: Any | None,
        receiver: SyntaxNode | None,
    ) -> MethodBinding | None:
        if object_node is None:
            declaring = self._resolve_static_member(name)
        elif isinstance(receiver, CallNode):
            declaring = (
                receiver.binding.return_type
                if receiver.binding is not None
                else None
            )
        elif object_node.type in _NAME_NODES:
            declaring = self._resolve_type(_dotted(object_node.text))
        else:
            declaring = None

        if declaring is None:
            return None
        return MethodBinding(
            declaring_type=declaring,
            name=name,
            return_type=self._settings.return_type_of(declaring, name),
        )

    def _resolve_static_member(self, name: str) -> str | None:
        declaring = self._imports.static_members.get(name)
        if declaring is not None:
            return declaring
        for candidate in self._imports.static_types:
            if self._settings.return_type_of(candidate, name) is not None:
                return candidate
        return None

    def _resolve_type(self, name: str) -> str | None:
        if "." in name:
            return name if self._settings.is_known_type(name) else None
        imported = self._imports.types.get(name)
        if imported is not None:
            return imported
        packages = list(self._imports.type_packages)
        if self._imports.package:
            packages.append(self._imports.package)
        for package in packages:
            candidate = f"{package}.{name}"
            if self._settings.is_known_type(candidate):
                return candidate
        return None
