"""Extracted link model."""

from dataclasses import dataclass

from .LinkKind import LinkKind


@dataclass(frozen=True)
class Link:
    """A link found in a document.

    ``href`` is set for direct links and reference definitions, ``label`` for
    reference uses (and definitions, which are keyed by it).
    """

    kind: LinkKind
    text: str
    href: str | None = None
    label: str | None = None

    @property
    def target(self) -> str:
        """Href, or the reference label for a reference use."""
        if self.kind is LinkKind.REFERENCE_USE:
            return self.label or ""
        return self.href or ""

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "text": self.text, "target": self.target}
