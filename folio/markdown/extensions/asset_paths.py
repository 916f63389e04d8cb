# folio/markdown/extensions/asset_paths.py
"""
Markdown extension that scopes relative image sources under a per-post path.

    ![Diagram](diagram.png)  ->  <img alt="Diagram" src="/blog-images/my-post/diagram.png">

Behavior:
- Only <img> elements produced from markdown syntax are visited. Raw HTML
  stashed by the parser is emitted untouched.
- Sources with a URL scheme (https:, data:, mailto:, ...) or protocol-relative
  sources (//cdn.example.com/...) are left as they are.
- Empty sources are left as they are.
"""

import re
from xml.etree import ElementTree as ET

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

_EXTERNAL_SRC_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.\-]*:|//)")


def is_external_reference(src: str) -> bool:
    return bool(_EXTERNAL_SRC_RE.match(src))


def scoped_asset_path(src: str, scope: str, asset_root: str) -> str:
    return f"/{asset_root.strip('/')}/{scope}/{src}"


def rewrite_image_sources(root: ET.Element, scope: str, asset_root: str) -> ET.Element:
    """Prefix every relative <img src> under root with /{asset_root}/{scope}/."""
    for img in root.iter("img"):
        src = img.get("src")
        if not src or is_external_reference(src):
            continue
        img.set("src", scoped_asset_path(src, scope, asset_root))
    return root


class AssetPathRewriter(Treeprocessor):
    def __init__(self, md, scope: str, asset_root: str):
        super().__init__(md)
        self.scope = scope
        self.asset_root = asset_root

    def run(self, root: ET.Element):
        rewrite_image_sources(root, self.scope, self.asset_root)


class AssetPathExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "scope": ["", "Identifier that namespaces relative image sources"],
            "asset_root": ["blog-images", "Leading URL segment for post images"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # The inline treeprocessor (priority 20) creates the <img> elements
        md.treeprocessors.register(
            AssetPathRewriter(
                md,
                scope=self.getConfig("scope"),
                asset_root=self.getConfig("asset_root"),
            ),
            "asset_paths",
            priority=15,
        )


def makeExtension(**kwargs):
    return AssetPathExtension(**kwargs)
