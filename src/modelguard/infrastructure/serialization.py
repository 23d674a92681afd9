"""
ErrorBag serializers.

XML follows the classic errors document shape::

    <?xml version="1.0" encoding="UTF-8"?>
    <errors>
      <error>Content is Empty</error>
    </errors>
"""

import json

from lxml import etree

from modelguard.domain.errors import ErrorBag

XML_INSTRUCT = '<?xml version="1.0" encoding="UTF-8"?>\n'


def errors_to_xml(errors: ErrorBag, skip_instruct: bool = False, indent: int = 2) -> str:
    """
    Render full messages as an <errors> document.

    Args:
        errors: The bag to serialize
        skip_instruct: Omit the leading XML declaration
        indent: Spaces per nesting level

    Returns:
        The XML document as text
    """
    root = etree.Element("errors")
    for message in errors.iter_full_messages():
        etree.SubElement(root, "error").text = message
    if len(root) and indent:
        etree.indent(root, space=" " * indent)
    body = etree.tostring(root, encoding="unicode")
    if skip_instruct:
        return body + "\n"
    return XML_INSTRUCT + body + "\n"


def errors_to_json(errors: ErrorBag, **dumps_kwargs) -> str:
    """Render the attribute -> messages mapping as a JSON object."""
    return json.dumps(errors.as_dict(), **dumps_kwargs)
