"""Semantic matcher extracting predicate arguments from route definitions."""

from __future__ import annotations

from fluxhover.core.config import MatcherSettings
from fluxhover.core.logging import Logger, get_logger

from .document import TextDocument
from .errors import BadLocationError
from .models import RouteElement, SkippedMatch
from .syntax import CallNode, NameNode, SyntaxNode, walk

__all__ = ["PredicateMatcher", "find_content_types", "find_accept_types"]


class PredicateMatcher:
    """Collect the names passed to one predicate method during a traversal.

    A call matches when its resolved binding is declared by
    ``declaring_type`` and named ``method``. The first bare identifier among
    its arguments becomes a :class:`RouteElement`. Calls returning one of
    ``boundary_return_types`` start a nested route definition; :meth:`visit`
    refuses to descend into them so an outer pass never picks up elements
    that belong to an inner route.

    Instances accumulate state and are meant for a single traversal.
    """

    def __init__(
        self,
        document: TextDocument,
        *,
        declaring_type: str,
        method: str,
        boundary_return_types: tuple[str, ...] | frozenset[str],
        logger: Logger | None = None,
    ) -> None:
        if document is None:
            raise ValueError("A document is required to build route ranges.")
        self._document = document
        self._declaring_type = declaring_type
        self._method = method
        self._boundary = frozenset(boundary_return_types)
        self._logger = logger or get_logger(__name__, matcher=method)
        self._results: list[RouteElement] = []
        self._skipped: list[SkippedMatch] = []

    @classmethod
    def for_content_types(
        cls,
        document: TextDocument,
        settings: MatcherSettings | None = None,
        *,
        logger: Logger | None = None,
    ) -> "PredicateMatcher":
        """Return a matcher for ``RequestPredicates.contentType`` calls."""

        settings = settings or MatcherSettings()
        return cls(
            document,
            declaring_type=settings.predicate_type,
            method=settings.content_type_method,
            boundary_return_types=settings.boundary_return_types,
            logger=logger,
        )

    @classmethod
    def for_accept_types(
        cls,
        document: TextDocument,
        settings: MatcherSettings | None = None,
        *,
        logger: Logger | None = None,
    ) -> "PredicateMatcher":
        """Return a matcher for ``RequestPredicates.accept`` calls."""

        settings = settings or MatcherSettings()
        return cls(
            document,
            declaring_type=settings.predicate_type,
            method=settings.accept_method,
            boundary_return_types=settings.boundary_return_types,
            logger=logger,
        )

    @property
    def results(self) -> tuple[RouteElement, ...]:
        """Elements found so far, in traversal order."""

        return tuple(self._results)

    @property
    def skipped(self) -> tuple[SkippedMatch, ...]:
        """Matches dropped because their argument could not be located."""

        return tuple(self._skipped)

    def visit(self, node: SyntaxNode) -> bool:
        """Inspect ``node`` and return whether its children should be visited."""

        if not isinstance(node, CallNode):
            return True

        binding = node.binding
        if binding is None:
            return True

        if (
            binding.declaring_type == self._declaring_type
            and binding.name == self._method
        ):
            self._record(node)

        return binding.return_type not in self._boundary

    def run(self, root: SyntaxNode) -> tuple[RouteElement, ...]:
        """Traverse ``root`` and return the collected elements."""

        walk(root, self.visit)
        return self.results

    def _record(self, node: CallNode) -> None:
        argument = _first_name_argument(node)
        if argument is None:
            return

        try:
            source_range = self._document.to_range(
                argument.start, argument.length
            )
        except BadLocationError as exc:
            self._skipped.append(
                SkippedMatch(
                    name=argument.identifier,
                    offset=argument.start,
                    length=argument.length,
                    reason=str(exc),
                )
            )
            self._logger.debug(
                "Skipping predicate argument outside document",
                name=argument.identifier,
                offset=argument.start,
                length=argument.length,
            )
            return

        self._results.append(
            RouteElement(name=argument.identifier, range=source_range)
        )


def _first_name_argument(node: CallNode) -> NameNode | None:
    for argument in node.arguments:
        if isinstance(argument, NameNode) and argument.identifier:
            return argument
    return None


def find_content_types(
    root: SyntaxNode,
    document: TextDocument,
    settings: MatcherSettings | None = None,
) -> tuple[RouteElement, ...]:
    """Return the content types declared under ``root``.

    A fresh matcher is built for every call.
    """

    return PredicateMatcher.for_content_types(document, settings).run(root)


def find_accept_types(
    root: SyntaxNode,
    document: TextDocument,
    settings: MatcherSettings | None = None,
) -> tuple[RouteElement, ...]:
    """Return the accepted media types declared under ``root``."""

    return PredicateMatcher.for_accept_types(document, settings).run(root)
