# =============================================================================
# Mail Store Tests
# =============================================================================

import pytest

from spoolview.core import Message
from spoolview.spool import MailStore, SpoolError


class TestFromPath:
    def test_loads_messages_in_file_order(self, mail_dir):
        store = MailStore.from_path(mail_dir / "alice")

        assert len(store) == 2
        assert store.get(0).to == "To: alice@example.com"
        assert store.get(1).text.startswith("From carol@example.com")
        assert all(m.mailbox == "alice" for m in store)

    def test_storage_keeps_original_text(self, mail_dir):
        store = MailStore.from_path(mail_dir / "bob")
        assert store.get(0).text == (mail_dir / "bob").read_text()

    def test_empty_file_gives_empty_store(self, temp_dir):
        (temp_dir / "nobody").write_text("")
        store = MailStore.from_path(temp_dir / "nobody")

        assert len(store) == 0
        assert not store

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(SpoolError):
            MailStore.from_path(temp_dir / "ghost")

    def test_undecodable_file_raises(self, mail_dir):
        with pytest.raises(SpoolError):
            MailStore.from_path(mail_dir / "broken")

    def test_directory_raises(self, temp_dir):
        (temp_dir / "sub").mkdir()
        with pytest.raises(SpoolError):
            MailStore.from_path(temp_dir / "sub")


class TestFromDirectory:
    def test_broken_mailbox_is_skipped(self, mail_dir):
        store = MailStore.from_directory(mail_dir)

        # alice 2 + bob 1 + carol 1
        assert len(store) == 4
        assert {m.mailbox for m in store} == {"alice", "bob", "carol"}
        assert [s.name for s in store.skipped] == ["broken"]
        assert store.skipped[0].reason

    def test_one_broken_among_three_valid_keeps_only_valid(self, temp_dir):
        (temp_dir / "a").write_text("From x\nTo: a\n\nFrom y\nTo: a\n")
        (temp_dir / "b").write_text("From x\nTo: b\n")
        (temp_dir / "c").write_text("From x\nTo: c\n")
        (temp_dir / "d").write_bytes(b"\x80\x81\x82")

        store = MailStore.from_directory(temp_dir)

        assert [m.mailbox for m in store] == ["a", "a", "b", "c"]
        assert [s.name for s in store.skipped] == ["d"]

    def test_subdirectory_is_skipped_not_fatal(self, mail_dir):
        (mail_dir / "zzz").mkdir()
        store = MailStore.from_directory(mail_dir)

        assert len(store) == 4
        assert "zzz" in [s.name for s in store.skipped]

    def test_skip_list(self, mail_dir):
        store = MailStore.from_directory(mail_dir, skip=["alice", "broken"])

        assert {m.mailbox for m in store} == {"bob", "carol"}
        assert store.skipped == []

    def test_order_is_by_mailbox_name(self, store):
        assert [m.mailbox for m in store] == ["alice", "alice", "bob", "carol"]

    def test_missing_directory_raises(self, temp_dir):
        with pytest.raises(SpoolError):
            MailStore.from_directory(temp_dir / "nope")

    def test_empty_directory(self, temp_dir):
        assert len(MailStore.from_directory(temp_dir)) == 0


class TestOpen:
    def test_user_selects_single_mailbox(self, mail_dir):
        store = MailStore.open(mail_dir, user="bob")
        assert [m.mailbox for m in store] == ["bob"]

    def test_unreadable_user_mailbox_is_fatal(self, mail_dir):
        with pytest.raises(SpoolError):
            MailStore.open(mail_dir, user="broken")

    def test_without_user_reads_directory(self, mail_dir):
        store = MailStore.open(mail_dir, skip=["carol"])
        assert {m.mailbox for m in store} == {"alice", "bob"}


class TestAccess:
    def test_get_out_of_range(self, store):
        with pytest.raises(IndexError):
            store.get(len(store))
        with pytest.raises(IndexError):
            store.get(-1)

    def test_indexing_matches_get(self, store):
        assert store[2] is store.get(2)
        assert isinstance(store[0], Message)
