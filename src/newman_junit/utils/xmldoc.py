"""
Small document builder over xml.dom.minidom.

Only what the JUnit reporter needs: nested elements, ordered attributes,
CDATA content and pretty serialization with a fixed declaration.
"""
from __future__ import annotations
import io
from typing import Dict, Any, Optional, TextIO
from xml.dom import minidom

DECLARATION = '<?xml version="1.0"?>'

# whitespace is escaped too, parsers fold raw newlines/tabs in attributes into spaces
_ATTR_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), ('"', "&quot;"), (">", "&gt;"),
                 ("\n", "&#xA;"), ("\r", "&#xD;"), ("\t", "&#x9;"))

def escape_attr(value: str) -> str:
    for raw, ent in _ATTR_ESCAPES:
        value = value.replace(raw, ent)
    return value

class _CData(minidom.CDATASection):
    # minidom refuses "]]>" inside a section; split it across two sections instead
    def writexml(self, writer, indent="", addindent="", newl=""):
        writer.write("<![CDATA[%s]]>" % self.data.replace("]]>", "]]]]><![CDATA[>"))

def _write(el: minidom.Element, writer: TextIO, indent: str, addindent: str, newl: str) -> None:
    # same layout as minidom's writexml, attribute escaping independent of the Python version
    writer.write(f"{indent}<{el.tagName}")
    for name, value in el.attributes.items():
        writer.write(f' {name}="{escape_attr(value)}"')
    children = el.childNodes
    if not children:
        writer.write(f"/>{newl}")
        return
    writer.write(">")
    if len(children) == 1 and children[0].nodeType == minidom.Node.CDATA_SECTION_NODE:
        children[0].writexml(writer)
    else:
        writer.write(newl)
        for child in children:
            if child.nodeType == minidom.Node.ELEMENT_NODE:
                _write(child, writer, indent + addindent, addindent, newl)
            else:
                writer.write(indent + addindent)
                child.writexml(writer)
                writer.write(newl)
        writer.write(indent)
    writer.write(f"</{el.tagName}>{newl}")

class Node:
    def __init__(self, doc: "Document", el: minidom.Element):
        self._doc = doc
        self._el = el

    def set(self, name: str, value: Any) -> "Node":
        self._el.setAttribute(name, "" if value is None else str(value))
        return self

    def element(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "Node":
        child = self._doc._dom.createElement(name)
        self._el.appendChild(child)
        node = Node(self._doc, child)
        for k, v in (attrs or {}).items():
            node.set(k, v)
        return node

    def cdata(self, value: str) -> "Node":
        section = _CData()
        section.data = value
        section.ownerDocument = self._doc._dom
        self._el.appendChild(section)
        return self

class Document:
    def __init__(self, root_name: str, attrs: Optional[Dict[str, Any]] = None):
        self._dom = minidom.getDOMImplementation().createDocument(None, root_name, None)
        self.root = Node(self, self._dom.documentElement)
        for k, v in (attrs or {}).items():
            self.root.set(k, v)

    def serialize(self, indent: str = "  ", newline: str = "\n") -> str:
        """Declaration, then the pretty-printed tree; always ends with ``newline``."""
        buf = io.StringIO()
        buf.write(DECLARATION + newline)
        _write(self._dom.documentElement, buf, "", indent, newline)
        return buf.getvalue()

class DocumentBuilder:
    @staticmethod
    def create(root_name: str, attrs: Optional[Dict[str, Any]] = None) -> Document:
        return Document(root_name, attrs)
