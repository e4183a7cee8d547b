from __future__ import annotations


def make_post(title: str, published: str, **meta) -> dict:
    """Build a raw blog index record."""
    fields = {"kind": "post", "title": title, "published": published}
    fields.update(meta)
    return {"url": f"/posts/{title.lower().replace(' ', '-')}.html", "meta": fields}
