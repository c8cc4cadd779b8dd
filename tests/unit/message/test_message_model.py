"""Unit tests for the message model."""
from __future__ import annotations

from pathlib import Path

import pytest

from socketlabs_client.message import (
    Attachment,
    BasicMessage,
    BulkMessage,
    BulkRecipient,
    CustomHeader,
    EmailAddress,
    MergeData,
    MessageType,
)


# ---------------------------------------------------------------------------
# EmailAddress
# ---------------------------------------------------------------------------
class TestEmailAddress:
    def test_valid_address(self):
        assert EmailAddress("user@example.com").is_valid

    @pytest.mark.parametrize("raw", ["", "plainaddress", "a@b", "@example.com", "a b@example.com"])
    def test_invalid_address(self, raw):
        assert not EmailAddress(raw).is_valid

    def test_whitespace_is_stripped(self):
        assert EmailAddress("  user@example.com ").email_address == "user@example.com"

    def test_frozen(self):
        addr = EmailAddress("user@example.com")
        with pytest.raises(Exception):  # frozen dataclass raises FrozenInstanceError
            addr.email_address = "other@example.com"  # type: ignore[misc]

    def test_to_wire_omits_missing_friendly_name(self):
        assert EmailAddress("a@x.com").to_wire() == {"emailAddress": "a@x.com"}

    def test_to_wire_with_friendly_name(self):
        assert EmailAddress("a@x.com", "Alice").to_wire() == {
            "emailAddress": "a@x.com",
            "friendlyName": "Alice",
        }

    def test_str_with_friendly_name(self):
        assert str(EmailAddress("a@x.com", "Alice")) == "Alice <a@x.com>"


# ---------------------------------------------------------------------------
# Headers / merge data
# ---------------------------------------------------------------------------
class TestCustomHeaderAndMergeData:
    def test_header_requires_name_and_value(self):
        assert CustomHeader("X-Tag", "v").is_valid
        assert not CustomHeader("", "v").is_valid
        assert not CustomHeader("X-Tag", "").is_valid

    def test_merge_data_requires_field(self):
        assert MergeData("Name", "").is_valid
        assert not MergeData("  ", "x").is_valid


# ---------------------------------------------------------------------------
# Attachment
# ---------------------------------------------------------------------------
class TestAttachment:
    def test_in_memory_attachment(self):
        att = Attachment(name="a.txt", mime_type="text/plain", content=b"hi")
        assert att.has_content
        assert not att.is_inline

    def test_from_path_guesses_mime_type(self, tmp_path: Path):
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF")
        att = Attachment.from_path(path)
        assert att.name == "report.pdf"
        assert att.mime_type == "application/pdf"
        assert att.content is None
        assert att.path == path

    def test_from_path_unknown_extension_defaults(self, tmp_path: Path):
        att = Attachment.from_path(tmp_path / "blob.zzzunknown")
        assert att.mime_type == "application/octet-stream"

    def test_inline_attachment(self):
        att = Attachment(name="logo.png", mime_type="image/png", content=b"\x89PNG", content_id="logo")
        assert att.is_inline

    def test_no_content(self):
        assert not Attachment(name="empty.txt").has_content

    def test_empty_bytes_is_no_content(self):
        assert not Attachment(name="empty.txt", content=b"").has_content

    def test_str_path_is_normalised(self, tmp_path: Path):
        att = Attachment(name="a.txt", path=str(tmp_path / "a.txt"))
        assert att.path == tmp_path / "a.txt"
        assert isinstance(att.path, Path)
        assert att.has_content


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------
class TestMessages:
    def test_discriminators(self):
        assert BasicMessage.message_type is MessageType.BASIC
        assert BulkMessage.message_type is MessageType.BULK

    def test_basic_defaults(self):
        msg = BasicMessage(subject="s")
        assert msg.to == []
        assert msg.cc == []
        assert msg.bcc == []
        assert msg.attachments == []
        assert msg.custom_headers == []
        assert msg.from_address is None
        assert not msg.has_body()

    def test_all_recipients_combines_to_cc_bcc(self):
        msg = BasicMessage(
            to=[EmailAddress("a@x.com")],
            cc=[EmailAddress("b@x.com")],
            bcc=[EmailAddress("c@x.com")],
        )
        assert [a.email_address for a in msg.all_recipients()] == ["a@x.com", "b@x.com", "c@x.com"]

    def test_all_recipients_accepts_tuples(self):
        msg = BasicMessage(to=(EmailAddress("a@x.com"),), cc=(EmailAddress("b@x.com"),))
        assert [a.email_address for a in msg.all_recipients()] == ["a@x.com", "b@x.com"]

    def test_bulk_recipient_address(self):
        recipient = BulkRecipient("a@x.com", "Alice", (MergeData("Color", "red"),))
        assert recipient.address == EmailAddress("a@x.com", "Alice")

    def test_bulk_defaults(self):
        msg = BulkMessage(subject="s", html_body="<p>x</p>")
        assert msg.to == []
        assert msg.global_merge_data == []
        assert msg.has_body()
