"""PHP Namespace Resolver - import, expand and sort PHP class references."""

__version__ = "0.1.0"
