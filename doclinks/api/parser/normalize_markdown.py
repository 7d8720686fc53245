"""Work around parser quirks before handing text to the backend."""

import re

# pandoc merges the following block into one ending in **]** unless a line break follows
_BOLD_BRACKET = re.compile(r"\*\*\]\*\*(?!\r?\n)")


def normalize_markdown(text: str) -> str:
    """Insert a newline after every ``**]**`` not already followed by one."""
    return _BOLD_BRACKET.sub("**]**\n", text)
