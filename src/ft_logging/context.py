"""
ft_logging Request Context

Provides the read-only key/value lookups a ColorLogger extracts values from,
and the extraction routine that renders configured keys as ``key=value``
pairs. Contexts are always passed explicitly by the caller.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping as MappingType, Optional, Sequence


@dataclass(frozen=True)
class RequestContext:
    """
    Immutable request-scoped context for log value extraction.

    Attributes:
        request_id: Unique identifier for the request being served
        user_id: Optional user identifier
        session_id: Optional session identifier
        trace_id: Optional distributed trace identifier
        attributes: Additional request-scoped values (extensible)
    """
    request_id: Optional[str] = None
    user_id: Optional[str] = None
    session_id: Optional[str] = None
    trace_id: Optional[str] = None
    attributes: MappingType[str, Any] = field(default_factory=dict)

    _KNOWN_FIELDS = ('request_id', 'user_id', 'session_id', 'trace_id')

    def __post_init__(self):
        """
        Freeze the attributes mapping.

        Raises:
            ValueError: If attributes reuse a well-known field name
        """
        clashing = sorted(set(self.attributes) & set(self._KNOWN_FIELDS))
        if clashing:
            raise ValueError(
                f"attributes cannot override well-known fields: {', '.join(clashing)}"
            )
        object.__setattr__(self, 'attributes', MappingProxyType(dict(self.attributes)))

    def value(self, key: str) -> Any:
        """
        Look up a value by key.

        Well-known names always resolve through their fields; every other key
        is read from ``attributes``.

        Args:
            key: Context key to look up

        Returns:
            The bound value, or None when the key is not set
        """
        if key in self._KNOWN_FIELDS:
            return getattr(self, key)
        return self.attributes.get(key)

    def with_value(self, key: str, value: Any) -> 'RequestContext':
        """
        Derive a new context with ``key`` bound to ``value``.

        Args:
            key: Context key to bind
            value: Value to bind

        Returns:
            New RequestContext; this context is left untouched
        """
        if key in self._KNOWN_FIELDS:
            return dataclasses.replace(self, **{key: value})
        return dataclasses.replace(self, attributes={**self.attributes, key: value})


def lookup_value(context: Any, key: str) -> Any:
    """
    Resolve a single key against a context lookup.

    Mappings are read with ``get``; objects exposing a ``value(key)`` method
    (such as RequestContext) are asked directly. Any other context, including
    None, resolves nothing.

    Args:
        context: Context lookup supplied by the caller (may be None)
        key: Context key to resolve

    Returns:
        The value, or None when the key is absent
    """
    if context is None:
        return None
    if isinstance(context, Mapping):
        return context.get(key)
    getter = getattr(context, 'value', None)
    if callable(getter):
        return getter(key)
    return None


def extract_context_info(context_keys: Optional[Sequence[str]], context: Any) -> str:
    """
    Render the configured keys found in a context.

    Keys are visited in configured order. Keys missing from the context are
    skipped silently; a value that renders to an empty string still counts
    as present.

    Args:
        context_keys: Ordered keys to extract (None or empty disables extraction)
        context: Context lookup supplied by the caller (may be None)

    Returns:
        Comma-separated ``key=value`` pairs, or an empty string when nothing resolves

    Example:
        >>> extract_context_info(["request_id", "user_id"], {"request_id": "abc123"})
        'request_id=abc123'
    """
    if context is None or not context_keys:
        return ""

    parts = []
    for key in context_keys:
        value = lookup_value(context, key)
        if value is not None:
            parts.append(f"{key}={value}")

    return ", ".join(parts)
