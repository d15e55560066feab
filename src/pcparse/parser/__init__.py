"""Grammar and tokenizer for .pc files."""

from pcparse.parser.grammar import parse_document
from pcparse.parser.nodes import Comment, DependencyList, Node, Property, Variable
from pcparse.parser.tokenizer import Scanner

__all__ = [
    "Comment",
    "DependencyList",
    "Node",
    "Property",
    "Scanner",
    "Variable",
    "parse_document",
]
