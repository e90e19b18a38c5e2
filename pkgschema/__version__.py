"""Version information for pkgschema."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to declarations or the metadata model
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Static (AST) package source and forward-reference type descriptions
#         - XmlSchemaType(type=...) accepts classes, descriptions and strings
#         - CLI `show` command with --static and --json
# 0.1.0 - Initial release
#         - NamespaceMetadata model, override and prefix registries
#         - Deterministic namespace ordering
