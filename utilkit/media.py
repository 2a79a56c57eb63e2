from __future__ import annotations

import base64
import re
from dataclasses import dataclass
from pathlib import Path

IMAGE_TYPE_RE = re.compile(r"\.(gif|jpg|jpeg|tiff|png|ico)$", re.IGNORECASE)
DEFAULT_IMAGE_TYPE = "jpg"


@dataclass
class Base64Image:
    name: str
    type: str
    data: str


@dataclass
class Blob:
    name: str
    content_type: str
    data: bytes


def image_type(name: str) -> str:
    match = IMAGE_TYPE_RE.search(name)
    if match is None:
        return DEFAULT_IMAGE_TYPE
    return match.group(1)


def base64_encode(path: Path | str) -> Base64Image:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Missing image at {path}")
    data = base64.b64encode(path.read_bytes()).decode("ascii")
    return Base64Image(name=path.name, type=image_type(path.name), data=data)


def to_blob(path: Path | str) -> Blob:
    encoded = base64_encode(path)
    return Blob(
        name=encoded.name,
        content_type=f"image/{encoded.type}",
        data=base64.b64decode(encoded.data),
    )
