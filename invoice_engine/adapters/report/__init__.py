"""Report adapters for rendering invoice trees.

Implementations:
- Text (indented plain-text statement)
"""

from .text import TextStatementRenderer

__all__ = ["TextStatementRenderer"]
