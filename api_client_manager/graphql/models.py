"""
GraphQL models and data structures.

This module defines the operations, results and errors exchanged with the
GraphQL clients handed out by the client manager.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..exceptions import ApiClientManagerError


class GraphQLError(ApiClientManagerError):
    """GraphQL-specific error."""
    pass


class GraphQLNetworkError(GraphQLError):
    """Raised when the GraphQL endpoint cannot be reached."""
    pass


class GraphQLTimeoutError(GraphQLError):
    """
    Raised when a GraphQL request times out.

    Attributes:
        timeout_value: The timeout value that was exceeded (in seconds)
    """

    def __init__(self, message: str, timeout_value: Optional[float] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.timeout_value = timeout_value


class GraphQLOperationType(str, Enum):
    """GraphQL operation types."""

    QUERY = "query"
    MUTATION = "mutation"


@dataclass
class GraphQLQuery:
    """GraphQL query definition."""

    query: str
    variables: Dict[str, Any] = field(default_factory=dict)
    operation_name: Optional[str] = None
    operation_type: GraphQLOperationType = GraphQLOperationType.QUERY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "query": self.query,
            "variables": self.variables
        }

        if self.operation_name:
            result["operationName"] = self.operation_name

        return result


@dataclass
class GraphQLMutation(GraphQLQuery):
    """GraphQL mutation definition."""

    operation_type: GraphQLOperationType = field(default=GraphQLOperationType.MUTATION, init=False)


@dataclass
class GraphQLResult:
    """Result of GraphQL operation."""

    success: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)
    extensions: Optional[Dict[str, Any]] = None
    response_time: Optional[float] = None
    status_code: int = 200
    from_cache: bool = False

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_messages(self) -> List[str]:
        """Messages of the GraphQL errors, with a placeholder for errors that carry none."""
        return [str(error.get("message") or "Unknown error") for error in self.errors]

    def get_data(self, path: Optional[str] = None) -> Any:
        """
        Look up a value in the response data.

        Args:
            path: Dot-separated field path such as ``"user.profile.name"``.
                Numeric segments index into lists (``"countries.0.code"``).

        Returns:
            The value at ``path``, the whole data object when no path is
            given, or None when any segment is missing
        """
        if not path or self.data is None:
            return self.data

        value: Any = self.data
        for segment in path.split("."):
            if isinstance(value, dict):
                if segment not in value:
                    return None
                value = value[segment]
            elif isinstance(value, list) and segment.isdigit() and int(segment) < len(value):
                value = value[int(segment)]
            else:
                return None
        return value
