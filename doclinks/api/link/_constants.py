"""Node kinds and patterns used by the link extractor (private)."""

import re

# Node field names (pandoc JSON)
KIND_KEY = "t"
CONTENT_KEY = "c"

# Node kinds
NODE_LINK = "Link"
NODE_LINK_REFERENCE = "LinkRef"
NODE_LINK_DEFINITION = "LinkDef"
NODE_RAW_INLINE = "RawInline"
NODE_HEADER = "Header"
NODE_STR = "Str"
NODE_CODE = "Code"
SPACE_NODES = frozenset({"Space", "SoftBreak", "LineBreak"})

RAW_HTML_FORMAT = "html"

# <a name="anchor">
NAMED_ANCHOR_PATTERN = re.compile(r"""<\s*a\s+name\s*=\s*["']([^"']*)["']""", re.IGNORECASE)
