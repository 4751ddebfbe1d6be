"""Attachments: files such as screenshots or responses added to a report."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .config import new_uuid
from .file_manager import FileManager


class MimeType(str, Enum):
    """Mime type of an attachment."""

    TEXT = "text/plain"
    CSV = "text/csv"
    TSV = "text/tab-separated-values"
    URI_LIST = "text/uri-list"

    HTML = "text/html"
    XML = "application/xml"
    JSON = "application/json"
    YAML = "application/yaml"
    PCAP = "application/vnd.tcpdump.pcap"

    PNG = "image/png"
    JPG = "image/jpg"
    SVG = "image/svg-xml"
    GIF = "image/gif"
    BMP = "image/bmp"
    TIFF = "image/tiff"

    MP4 = "video/mp4"
    OGG = "video/ogg"
    WEBM = "video/webm"
    MPEG = "video/mpeg"

    PDF = "application/pdf"

    def __str__(self) -> str:
        return self.value


_EXTENSIONS = {
    MimeType.TEXT: "txt",
    MimeType.CSV: "csv",
    MimeType.TSV: "tsv",
    MimeType.URI_LIST: "uri",
    MimeType.HTML: "html",
    MimeType.XML: "xml",
    MimeType.JSON: "json",
    MimeType.YAML: "yaml",
    MimeType.PCAP: "pcap",
    MimeType.PNG: "png",
    MimeType.JPG: "jpg",
    MimeType.SVG: "svg",
    MimeType.GIF: "gif",
    MimeType.BMP: "bmp",
    MimeType.TIFF: "tiff",
    MimeType.MP4: "mp4",
    MimeType.OGG: "ogg",
    MimeType.WEBM: "webm",
    MimeType.MPEG: "mpeg",
    MimeType.PDF: "pdf",
}


def extension_for(mime_type: Union[MimeType, str]) -> str:
    """File extension for a mime type, or an empty string if it is unknown."""
    try:
        return _EXTENSIONS[MimeType(mime_type)]
    except ValueError:
        return ""


def _as_mime_type(mime_type: Union[MimeType, str]) -> Union[MimeType, str]:
    try:
        return MimeType(mime_type)
    except ValueError:
        return str(mime_type)


@dataclass(init=False)
class Attachment:
    """Content attached to a test or step, stored as its own file."""

    name: str
    source: str
    type: Union[MimeType, str]
    uuid: str
    content: bytes

    def __init__(self, name: str, mime_type: Union[MimeType, str], content: Union[bytes, str]):
        self.uuid = str(new_uuid())
        self.name = name
        self.type = _as_mime_type(mime_type)
        self.content = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        self.source = f"{self.uuid}-attachment.{extension_for(mime_type)}"

    def print(self):
        """Write the content to the results folder under ``source``."""
        return FileManager().create_file(self.source, self.content)

    def to_dict(self) -> dict:
        data = {}
        if self.name:
            data["name"] = self.name
        if self.source:
            data["source"] = self.source
        type_text = self.type.value if isinstance(self.type, MimeType) else self.type
        if type_text:
            data["type"] = type_text
        return data