"""Errors raised at the host boundary."""

from __future__ import annotations


class LayoutMismatchError(ValueError):
    """A divider decoration was paired with a layout kind it cannot serve."""

    def __init__(self, decoration: str, kind: object, supported: tuple[object, ...]) -> None:
        names = ", ".join(str(getattr(s, "value", s)) for s in supported)
        super().__init__(
            f"{decoration} requires a {names} layout, got {getattr(kind, 'value', kind)}"
        )
        self.decoration = decoration
        self.kind = kind
        self.supported = supported
