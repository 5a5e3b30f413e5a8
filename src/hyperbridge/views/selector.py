"""CSS-selector parsing for hyperscript tags.

``compile_selector("a#home.nav.active[href=/][data-x='1']")`` yields the tag
and the attributes the selector implies. The function is pure: each call
returns fresh attrs, so callers may mutate them freely.
"""

import re
from dataclasses import dataclass, field
from typing import Any

_SELECTOR_PARSER = re.compile(
    r"""(?:(^|\#|\.)([^#.\[\]]+))|(\[(.+?)(?:\s*=\s*("|'|)((?:\\["'\]]|.)*?)\5)?\])"""
)
_ESCAPED_QUOTE = re.compile(r"""\\(["'])""")


@dataclass(slots=True)
class Selector:
    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)


def compile_selector(selector: str, default_tag: str = "div") -> Selector:
    """Split a selector into a tag plus ``id``/``className``/attribute attrs.

    - ``#x`` sets ``id``; ``.a.b`` joins into ``className``;
    - ``[name=value]`` sets an attribute, ``[name]`` sets it to ``True``,
      ``[class=x]`` adds to the class list;
    - a selector without a leading tag uses *default_tag*.
    """
    tag = default_tag
    classes: list[str] = []
    attrs: dict[str, Any] = {}

    for match in _SELECTOR_PARSER.finditer(selector):
        kind, value = match.group(1), match.group(2)
        if kind == "" and value:
            tag = value
        elif kind == "#":
            attrs["id"] = value
        elif kind == ".":
            classes.append(value)
        elif match.group(3):
            attr_value = match.group(6)
            if attr_value:
                attr_value = _ESCAPED_QUOTE.sub(r"\1", attr_value).replace("\\\\", "\\")
            name = match.group(4)
            if name == "class":
                if attr_value:
                    classes.append(attr_value)
            else:
                attrs[name] = attr_value if attr_value == "" else attr_value or True

    if classes:
        attrs["className"] = " ".join(classes)
    return Selector(tag=tag, attrs=attrs)
