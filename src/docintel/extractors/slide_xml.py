"""Minimal PPTX reader working directly on the slide XML parts.

Used when python-pptx rejects a package (missing relationships, odd
content types) but the slide XML itself is intact.
"""

import re
import zipfile
from typing import Dict, List

from lxml import etree

DRAWING_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
SLIDE_PART = re.compile(r"^ppt/slides/slide(\d+)\.xml$")


def _slide_paragraphs(xml: bytes) -> List[str]:
    root = etree.fromstring(xml)
    paragraphs = []
    for para in root.iter(f"{{{DRAWING_NS}}}p"):
        runs = [t.text or "" for t in para.iter(f"{{{DRAWING_NS}}}t")]
        line = "".join(runs).strip()
        if line:
            paragraphs.append(line)
    return paragraphs


def extract_slides(path: str) -> Dict[str, List[Dict[str, str]]]:
    """Return ``{"slides": [{"text": ...}, ...]}`` in slide order."""
    with zipfile.ZipFile(path) as archive:
        parts = []
        for name in archive.namelist():
            match = SLIDE_PART.match(name)
            if match:
                parts.append((int(match.group(1)), name))

        slides = []
        for _, name in sorted(parts):
            text = "\n".join(_slide_paragraphs(archive.read(name)))
            slides.append({"text": text})

    return {"slides": slides}


default = extract_slides
