import pytest

from allure_model.attachment import Attachment, MimeType, extension_for

EXPECTED_EXTENSIONS = {
    "text/plain": "txt",
    "text/csv": "csv",
    "text/tab-separated-values": "tsv",
    "text/uri-list": "uri",
    "text/html": "html",
    "application/xml": "xml",
    "application/json": "json",
    "application/yaml": "yaml",
    "application/vnd.tcpdump.pcap": "pcap",
    "image/png": "png",
    "image/jpg": "jpg",
    "image/svg-xml": "svg",
    "image/gif": "gif",
    "image/bmp": "bmp",
    "image/tiff": "tiff",
    "video/mp4": "mp4",
    "video/ogg": "ogg",
    "video/webm": "webm",
    "video/mpeg": "mpeg",
    "application/pdf": "pdf",
}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ALLURE_OUTPUT_PATH", raising=False)
    monkeypatch.delenv("ALLURE_OUTPUT_FOLDER", raising=False)
    return tmp_path


def test_every_mime_type_has_its_extension():
    assert {m.value: extension_for(m) for m in MimeType} == EXPECTED_EXTENSIONS


@pytest.mark.parametrize("mime_text, extension", sorted(EXPECTED_EXTENSIONS.items()))
def test_new_attachment(mime_text, extension):
    name = f"Test init fileType: {mime_text}"
    content = b"some content"
    attachment = Attachment(name, MimeType(mime_text), content)
    assert attachment.uuid
    assert attachment.type == MimeType(mime_text)
    assert attachment.name == name
    assert attachment.content == content
    assert attachment.source == f"{attachment.uuid}-attachment.{extension}"


@pytest.mark.parametrize("mime_type", list(MimeType))
def test_attachment_print(workdir, mime_type):
    attachment = Attachment(f"Test init fileType: {mime_type}", mime_type, b"some content")
    attachment.print()
    written = workdir / "allure-results" / attachment.source
    assert written.is_file()
    assert written.read_bytes() == b"some content"


def test_attachment_uuids_differ():
    first = Attachment("a", MimeType.TEXT, b"some content")
    second = Attachment("a", MimeType.TEXT, b"some content")
    assert first.uuid != second.uuid
    assert first.source != second.source


def test_attachment_content_kept():
    attachment = Attachment("a", MimeType.TEXT, b"some content")
    assert attachment.content == b"some content"


def test_unknown_mime_type_has_empty_extension():
    attachment = Attachment("custom", "application/x-custom", b"data")
    assert extension_for("application/x-custom") == ""
    assert attachment.source.endswith("-attachment.")
    assert attachment.type == "application/x-custom"


def test_mime_type_given_as_text():
    attachment = Attachment("t", "text/plain", "hello")
    assert attachment.type is MimeType.TEXT
    assert attachment.content == b"hello"
    assert attachment.source.endswith("-attachment.txt")


def test_to_dict():
    attachment = Attachment("name", MimeType.JSON, b"{}")
    assert attachment.to_dict() == {
        "name": "name",
        "source": attachment.source,
        "type": "application/json",
    }


def test_to_dict_omits_empty_name():
    attachment = Attachment("", MimeType.PNG, b"")
    assert "name" not in attachment.to_dict()
    assert attachment.to_dict()["type"] == "image/png"