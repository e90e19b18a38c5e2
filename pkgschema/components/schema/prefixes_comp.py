"""Namespace prefix registry component."""

from __future__ import annotations

import logging

from pkgschema.helpers.dto.declarations_dto import XmlSchema

logger = logging.getLogger(__name__)


def build_namespace_prefixes(schema: XmlSchema | None) -> dict[str, str]:
    """
    Map namespace URIs to their preferred prefixes.

    Bindings are applied in declaration order; a URI bound twice keeps the
    last prefix.

    Args:
        schema: The package's XmlSchema declaration, or None

    Returns:
        Fresh dict of namespace URI -> prefix (empty without a declaration)
    """
    prefixes: dict[str, str] = {}
    if schema is None:
        return prefixes

    for binding in schema.xmlns:
        previous = prefixes.get(binding.namespace_uri)
        if previous is not None and previous != binding.prefix:
            logger.debug("Prefix %r for %s replaced by %r", previous, binding.namespace_uri, binding.prefix)
        prefixes[binding.namespace_uri] = binding.prefix
    return prefixes
