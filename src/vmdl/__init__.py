"""VMDL — reader/writer for an indentation-structured configuration format."""

from .decoder import decode
from .encoder import encode, to_json
from .document import Document
from .getter import get_path, get_section, get_string, split_path
from .model import Empty, Frame, Node, Tree, is_section
from .errors import VMDLError, VMDLDecodeError

__all__ = [
    "decode",
    "encode",
    "to_json",
    "Document",
    "get_path",
    "get_section",
    "get_string",
    "split_path",
    "Empty",
    "Frame",
    "Node",
    "Tree",
    "is_section",
    "VMDLError",
    "VMDLDecodeError",
]
