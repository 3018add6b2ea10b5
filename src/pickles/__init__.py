"""Pickles - runtime configuration for living documentation generation"""

__version__ = "1.0.0"
__description__ = "Runtime configuration for living documentation generation"

__all__ = [
    "Arguments",
    "Configuration",
    "DocumentationFormat",
    "InvalidArgumentError",
    "TestResultsFormat",
    "__version__",
]


def __getattr__(name: str):
    """Lazy import so ``import pickles`` does not read the environment.

    ``pickles.config`` calls load_dotenv() at import time; only the
    env adapter needs it.
    """
    if name == "Configuration":
        from .core.configuration import Configuration

        return Configuration
    if name == "Arguments":
        from .core.arguments import Arguments

        return Arguments
    if name in ("DocumentationFormat", "TestResultsFormat"):
        from .core import formats

        return getattr(formats, name)
    if name == "InvalidArgumentError":
        from .core.errors import InvalidArgumentError

        return InvalidArgumentError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
