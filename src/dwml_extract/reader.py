"""
XML input for DWML documents.

Thin wrapper around lxml; the parser neither resolves entities nor touches
the network.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from .core.exceptions import DWMLParseError

logger = logging.getLogger(__name__)


def _parser(encoding: Optional[str] = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_blank_text=True,
    )


def parse_xml(text: Union[str, bytes]) -> etree._Element:
    """
    Parse DWML text into a tree.

    Args:
        text: XML document (str, or bytes in the encoding it declares)

    Returns:
        Root element

    Raises:
        DWMLParseError: If the text is not well-formed XML
    """
    encoding = None
    if isinstance(text, str):
        # already decoded: the encoding declaration must not apply again
        text = text.encode("utf-8")
        encoding = "utf-8"

    try:
        return etree.fromstring(text, parser=_parser(encoding))
    except etree.XMLSyntaxError as e:
        raise DWMLParseError(f"Invalid DWML document: {e}") from e


def read_xml(path: Union[str, Path]) -> etree._Element:
    """
    Read and parse a DWML file.

    Raises:
        FileNotFoundError: If the file does not exist
        DWMLParseError: If the file is not well-formed XML
    """
    xml_path = Path(path)
    logger.debug(f"Reading DWML from {xml_path}")
    return parse_xml(xml_path.read_bytes())


def load_document(path: Union[str, Path], **kwargs):
    """Read a DWML file and wrap it in a DWMLDocument."""
    from .dwml import DWMLDocument
    return DWMLDocument(read_xml(path), **kwargs)
