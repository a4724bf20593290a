"""Drive predicate matchers over every route definition in a tree."""

from __future__ import annotations

from fluxhover.core.config import MatcherSettings, load_config
from fluxhover.core.logging import Logger, get_logger

from .document import TextDocument
from .errors import BadLocationError
from .matcher import PredicateMatcher
from .models import RouteDefinition
from .syntax import CallNode, SyntaxNode, child_nodes

__all__ = ["RouteScanner", "scan_java_routes"]


class RouteScanner:
    """Find route-definition calls and extract their predicate elements.

    Every call whose resolved return type is a boundary type and that takes
    at least two arguments is treated as ``route(predicate, ...)``. The
    predicate argument is handed to fresh content-type and accept matchers;
    the receiver and remaining arguments are scanned for nested routes.
    """

    def __init__(
        self,
        document: TextDocument,
        settings: MatcherSettings | None = None,
        *,
        logger: Logger | None = None,
    ) -> None:
        if document is None:
            raise ValueError("A document is required to scan routes.")
        self._document = document
        self._settings = settings or load_config().matcher
        self._boundary = frozenset(self._settings.boundary_return_types)
        self._logger = logger or get_logger(__name__)

    def scan(self, root: SyntaxNode) -> tuple[RouteDefinition, ...]:
        """Return route definitions under ``root`` ordered by source offset.

        Each definition's range starts at the method name, so every call of
        a chain such as ``route(...).andRoute(...)`` gets its own location.
        """

        if root is None:
            raise ValueError("A syntax tree root is required for scanning.")

        definitions: list[RouteDefinition] = []
        stack: list[SyntaxNode] = [root]
        while stack:
            node = stack.pop()
            children = child_nodes(node)
            if self._is_route_definition(node):
                definition = self._describe(node)
                if definition is not None:
                    definitions.append(definition)
                children = tuple(
                    child for child in children if child is not node.arguments[0]
                )
            stack.extend(reversed(children))

        self._logger.debug(
            "Scanned route definitions",
            uri=self._document.uri,
            count=len(definitions),
        )
        return tuple(sorted(definitions, key=lambda item: item.range.offset))

    def _is_route_definition(self, node: SyntaxNode) -> bool:
        return (
            isinstance(node, CallNode)
            and node.binding is not None
            and node.binding.return_type in self._boundary
            and len(node.arguments) >= 2
        )

    def _describe(self, node: CallNode) -> RouteDefinition | None:
        predicate = node.arguments[0]
        content_types = PredicateMatcher.for_content_types(
            self._document, self._settings, logger=self._logger
        ).run(predicate)
        accept_types = PredicateMatcher.for_accept_types(
            self._document, self._settings, logger=self._logger
        ).run(predicate)

        start = node.start if node.name_start is None else node.name_start
        length = node.start + node.length - start
        try:
            source_range = self._document.to_range(start, length)
        except BadLocationError:
            self._logger.debug(
                "Skipping route definition outside document",
                offset=start,
                length=length,
            )
            return None

        return RouteDefinition(
            method=node.binding.name,
            range=source_range,
            content_types=content_types,
            accept_types=accept_types,
        )


def scan_java_routes(
    text: str,
    settings: MatcherSettings | None = None,
    *,
    uri: str | None = None,
) -> tuple[RouteDefinition, ...]:
    """Parse Java ``text`` and return its route definitions."""

    from .java import JavaTreeBuilder

    settings = settings or load_config().matcher
    parsed = JavaTreeBuilder(settings).parse(text, uri=uri)
    return RouteScanner(parsed.document, settings).scan(parsed.root)
