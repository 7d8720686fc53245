"""Reference definition model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Reference:
    """Target of a reference label (``[label]: href "title"``)."""

    href: str
    title: str = ""
