"""
Design token resolver - dereferences '@token' references in style values.

Tokens are registered as a namespace of categories:

    {"colors": {"primary": "#1677FF", "text": "@neutral-900"}, ...}

Registration flattens the namespace into a single lookup, following every
reference chain to its concrete value. Category names only organise the
table; token names are the resolvable keys.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from chuk_mcp_design_tokens.constants import (
    COLOR_STOPS_KEY,
    PAINT_KEYS,
    STOP_COLOR_KEY,
    TOKEN_PREFIX,
    ErrorMessages,
)

logger = logging.getLogger(__name__)

TokenValue = str | int | float
TokenNamespace = dict[str, dict[str, TokenValue]]


class CyclicTokenReferenceError(ValueError):
    """A token reference chain loops back on itself."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(ErrorMessages.CYCLIC_REFERENCE.format(chain=" -> ".join(chain)))


def is_token_reference(value: Any) -> bool:
    """Check if a value is a token reference string."""
    return isinstance(value, str) and value.startswith(TOKEN_PREFIX)


class DesignTokenResolver:
    """
    Resolves design token references for theming.

    The resolver:
    - Stores a token namespace (category -> token name -> value)
    - Flattens it into a resolved lookup at registration time
    - Resolves single references, colours (including gradient stops)
      and the fill/stroke fields of style mappings

    Inputs are never mutated; resolving returns copies. Registration swaps
    in new state wholesale, so concurrent use from several threads needs an
    external lock.
    """

    def __init__(self, tokens: Mapping[str, Mapping[str, TokenValue]] | None = None):
        """
        Initialize the resolver.

        Args:
            tokens: Optional namespace to register immediately
        """
        self._design_tokens: TokenNamespace = {}
        self._resolved_tokens: dict[str, TokenValue] = {}
        if tokens is not None:
            self.register_tokens(tokens)

    @property
    def tokens(self) -> TokenNamespace:
        """The registered namespace (copy)."""
        return {category: dict(values) for category, values in self._design_tokens.items()}

    @property
    def resolved_tokens(self) -> dict[str, TokenValue]:
        """The flattened token lookup (copy)."""
        return dict(self._resolved_tokens)

    def register_tokens(self, tokens: Mapping[str, Mapping[str, TokenValue]]) -> None:
        """
        Register design tokens, replacing any previous registration.

        Args:
            tokens: Namespace mapping category names to token mappings

        Raises:
            CyclicTokenReferenceError: If a reference chain loops. The
                previous registration stays in effect.
        """
        design_tokens = dict(tokens)
        resolved = self._flatten(design_tokens)

        self._design_tokens = design_tokens
        self._resolved_tokens = resolved
        logger.debug(
            "Registered %d tokens from %d categories",
            len(resolved),
            len(design_tokens),
        )

    def get_token_value(self, token: Any) -> Any:
        """
        Get the resolved value of a design token.

        Args:
            token: Token reference (e.g. '@border'); anything else passes through

        Returns:
            Resolved value, or the original token if it is not registered
        """
        if not is_token_reference(token):
            return token
        key = token[len(TOKEN_PREFIX) :]
        if key not in self._resolved_tokens:
            logger.debug("Unresolved token reference: %s", token)
            return token
        return self._resolved_tokens[key]

    def resolve_color(self, color: Any) -> Any:
        """
        Resolve a colour value, handling design tokens.

        Plain strings go through get_token_value. Gradients (mappings with a
        colorStops list, even an empty one) are copied with each stop colour
        resolved. Patterns and other values are returned unchanged.

        Args:
            color: Colour string, gradient mapping or pattern object

        Returns:
            The resolved colour (a new gradient when one was given)
        """
        if not color:
            return color

        if isinstance(color, str):
            return self.get_token_value(color)

        if isinstance(color, Mapping) and color.get(COLOR_STOPS_KEY) is not None:
            gradient = dict(color)
            gradient[COLOR_STOPS_KEY] = [self._resolve_stop(stop) for stop in color[COLOR_STOPS_KEY]]
            return gradient

        return color

    def get_paint_style(self, style: Mapping[str, Any] | None) -> Any:
        """
        Get the resolved style for painting.

        Resolves fill and stroke whenever they are set (None counts as unset).
        Anything that is not a mapping is returned unchanged.
        """
        if not isinstance(style, Mapping):
            return style
        paint_style = dict(style)

        for key in PAINT_KEYS:
            if style.get(key) is not None:
                paint_style[key] = self.resolve_color(style[key])

        return paint_style

    def resolve_style(self, style: Mapping[str, Any] | None) -> Any:
        """
        Resolve a style mapping with design tokens.

        Only truthy fill and stroke values are resolved. Anything that is
        not a mapping is returned unchanged.
        """
        if not isinstance(style, Mapping):
            return style
        resolved_style = dict(style)

        for key in PAINT_KEYS:
            if style.get(key):
                resolved_style[key] = self.resolve_color(style[key])

        return resolved_style

    def _resolve_stop(self, stop: Mapping[str, Any]) -> dict[str, Any]:
        """Copy a gradient stop with its colour resolved."""
        new_stop = dict(stop)
        new_stop[STOP_COLOR_KEY] = self.get_token_value(stop.get(STOP_COLOR_KEY))
        return new_stop

    def _flatten(self, design_tokens: TokenNamespace) -> dict[str, TokenValue]:
        """Build the resolved lookup; later categories win on name clashes."""
        resolved: dict[str, TokenValue] = {}
        for category in design_tokens.values():
            for key, value in category.items():
                resolved[key] = self._dereference(design_tokens, value)
        return resolved

    def _dereference(self, design_tokens: TokenNamespace, value: TokenValue) -> TokenValue:
        """
        Follow a reference chain through the namespace to a concrete value.

        References are looked up in the first category defining the name.
        The chain is walked iteratively, so its length is bounded only by
        the size of the namespace.
        """
        followed: list[str] = []
        seen: set[str] = set()
        while is_token_reference(value):
            token_key = value[len(TOKEN_PREFIX) :]
            category = next(
                (category for category in design_tokens.values() if token_key in category),
                None,
            )
            if category is None:
                # Unknown token, keep the reference verbatim
                return value
            if token_key in seen:
                raise CyclicTokenReferenceError([*followed, token_key])
            followed.append(token_key)
            seen.add(token_key)
            value = category[token_key]

        return value
