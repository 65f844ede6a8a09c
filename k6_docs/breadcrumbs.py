"""Derive breadcrumb trails from finalized route paths.

Breadcrumbs are computed from the route alone; intermediate folders have no
document of their own, so labels are humanized segments rather than
frontmatter titles (``javascript-api`` reads "Javascript Api").

>>> from k6_docs.breadcrumbs import build_breadcrumbs
>>> [crumb.label for crumb in build_breadcrumbs("/using-k6/protocols/ssl-tls")]
['Using K6', 'Protocols', 'Ssl Tls']
"""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class Breadcrumb:
    """A single ancestor link shown above a page."""

    label: str
    path: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-ready mapping of the breadcrumb."""
        return {"label": self.label, "path": self.path}


def humanize_segment(segment: str) -> str:
    """Turn a slug segment into a capitalized, space-separated label."""
    words = segment.replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def build_breadcrumbs(route_path: str) -> tuple[Breadcrumb, ...]:
    """Return one breadcrumb per segment prefix of ``route_path``, root excluded."""
    crumbs: list[Breadcrumb] = []
    prefix = ""
    for segment in route_path.split("/"):
        if not segment:
            continue
        prefix = f"{prefix}/{segment}"
        crumbs.append(Breadcrumb(label=humanize_segment(segment), path=prefix))
    return tuple(crumbs)


__all__ = ["Breadcrumb", "build_breadcrumbs", "humanize_segment"]
