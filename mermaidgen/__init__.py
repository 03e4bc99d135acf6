"""Build Mermaid block, class and entity-relationship diagram text in Python."""

__version__ = "0.1.0"
__all__ = ["block", "class_members", "classdiagram", "erdiagram"]