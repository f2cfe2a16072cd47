# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the spoolview test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from spoolview.spool import MailStore


ALICE_SPOOL = """\
From bob@example.com  Mon Jan  1 10:00:00 2024
Return-Path: <bob@example.com>
Date: Mon, 1 Jan 2024 10:00:00 +0000 (UTC)
From: Bob <bob@example.com>
To: alice@example.com
Subject: Lunch

Lunch at noon?

From carol@example.com  Tue Jan  2 09:30:00 2024
Date: Tue, 2 Jan 2024 09:30:00 +0100 (CET)
From: Carol <carol@example.com>
To: alice@example.com
Subject: Re: Lunch

> Lunch at noon?
From what I remember, noon is fine.
"""

BOB_SPOOL = """\
From alice@example.com  Wed Jan  3 08:00:00 2024
Date: Wed, 3 Jan 2024 08:00:00 +0000
To: bob@example.com
Subject: Report

Line 1
Line 2
Line 3
"""

CAROL_SPOOL = """\
From root@localhost  Thu Jan  4 00:00:00 2024
To: carol@localhost
Subject: Cron

Cron output
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def alice_spool():
    """A spool with two messages, one quoting a "From " line in its body."""
    return ALICE_SPOOL


@pytest.fixture
def mail_dir(temp_dir):
    """
    A spool directory with three readable mailboxes and one broken one.

    Messages: alice 2, bob 1, carol 1. "broken" is not valid UTF-8.
    The spool is a subdirectory so config and log files written to
    temp_dir never show up as mailboxes.
    """
    spool = temp_dir / "spool"
    spool.mkdir()
    (spool / "alice").write_text(ALICE_SPOOL, encoding="utf-8")
    (spool / "bob").write_text(BOB_SPOOL, encoding="utf-8")
    (spool / "carol").write_text(CAROL_SPOOL, encoding="utf-8")
    (spool / "broken").write_bytes(b"From x\n\xff\xfe\xfa not utf-8\n")
    return spool


@pytest.fixture
def store(mail_dir):
    """A MailStore loaded from the sample spool directory."""
    return MailStore.from_directory(mail_dir)
