"""Route analysis: resolved syntax trees, predicate matching and scanning."""

from __future__ import annotations

from .document import TextDocument
from .errors import BadLocationError, FrontendUnavailableError, RouteAnalysisError
from .matcher import PredicateMatcher, find_accept_types, find_content_types
from .models import (
    Position,
    RouteDefinition,
    RouteElement,
    SkippedMatch,
    SourceRange,
)
from .scanner import RouteScanner, scan_java_routes
from .syntax import (
    CallNode,
    ExpressionNode,
    MethodBinding,
    NameNode,
    SyntaxNode,
    walk,
)

__all__ = [
    "BadLocationError",
    "CallNode",
    "ExpressionNode",
    "FrontendUnavailableError",
    "MethodBinding",
    "NameNode",
    "Position",
    "PredicateMatcher",
    "RouteAnalysisError",
    "RouteDefinition",
    "RouteElement",
    "RouteScanner",
    "SkippedMatch",
    "SourceRange",
    "SyntaxNode",
    "TextDocument",
    "find_accept_types",
    "find_content_types",
    "scan_java_routes",
    "walk",
]
