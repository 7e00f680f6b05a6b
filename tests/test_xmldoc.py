import xml.etree.ElementTree as ET

from newman_junit.utils.xmldoc import DocumentBuilder, escape_attr


def test_serialize_nested_with_attribute_order() -> None:
    doc = DocumentBuilder.create("root", {"b": 1, "a": "x"})
    child = doc.root.element("child", {"name": 'say "hi" & <bye>'})
    child.element("leaf")
    doc.root.element("note").cdata("a < b")
    doc.root.set("z", 0.5)
    assert doc.serialize() == (
        '<?xml version="1.0"?>\n'
        '<root b="1" a="x" z="0.5">\n'
        '  <child name="say &quot;hi&quot; &amp; &lt;bye&gt;">\n'
        "    <leaf/>\n"
        "  </child>\n"
        "  <note><![CDATA[a < b]]></note>\n"
        "</root>\n"
    )


def test_cdata_with_terminator_is_split() -> None:
    doc = DocumentBuilder.create("r")
    doc.root.element("error").cdata("a ]]> b")
    out = doc.serialize()
    assert "<error><![CDATA[a ]]]]><![CDATA[> b]]></error>" in out
    assert ET.fromstring(out.encode()).find("error").text == "a ]]> b"


def test_attribute_whitespace_survives_parsing() -> None:
    value = "line one\nline two\r\n\tindented"
    doc = DocumentBuilder.create("r", {"message": value})
    out = doc.serialize()
    assert 'message="line one&#xA;line two&#xD;&#xA;&#x9;indented"' in out
    assert ET.fromstring(out.encode()).get("message") == value


def test_escape_attr() -> None:
    assert escape_attr('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
