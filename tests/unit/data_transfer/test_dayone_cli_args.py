"""
Unit tests for the Day One CLI wrapper.
"""
import subprocess
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from moodbridge.core.exceptions import DayOneCommandError
from moodbridge.data_transfer.dayone import DayOneCLI, DayOneEntryRequest
from moodbridge.data_transfer.dayone.dayone_cli import format_iso_date

ONE_SECOND_PAST_EPOCH = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)


def test_format_iso_date():
    assert format_iso_date(ONE_SECOND_PAST_EPOCH) == "1970-01-01T00:00:01Z"


def test_format_iso_date_converts_to_utc():
    local = datetime(1970, 1, 1, 1, 0, 1, tzinfo=timezone(timedelta(hours=1)))

    assert format_iso_date(local) == "1970-01-01T00:00:01Z"


def test_build_args_all_options():
    request = DayOneEntryRequest(
        content="Entry content",
        attachments=[Path("/bin/bash"), Path("/bin/sh")],
        tags=["tag1", "tag2"],
        journal="Journal",
        timestamp=ONE_SECOND_PAST_EPOCH,
        starred=True,
    )

    assert DayOneCLI.build_args(request) == [
        "--attachments",
        "/bin/bash",
        "/bin/sh",
        "--tags",
        "tag1",
        "tag2",
        "--journal",
        "Journal",
        "--isoDate",
        "1970-01-01T00:00:01Z",
        "--starred",
        "--",
        "new",
        "Entry content",
    ]


def test_build_args_without_options_has_no_separator():
    request = DayOneEntryRequest(content="Just text")

    assert DayOneCLI.build_args(request) == ["new", "Just text"]


def test_build_args_only_tags():
    request = DayOneEntryRequest(content="-starts with a dash", tags=["mood/3"])

    assert DayOneCLI.build_args(request) == ["--tags", "mood/3", "--", "new", "-starts with a dash"]


def test_request_rejects_relative_attachments():
    with pytest.raises(ValueError):
        DayOneEntryRequest(content="x", attachments=[Path("relative.png")])


def test_request_rejects_naive_timestamp():
    with pytest.raises(ValueError):
        DayOneEntryRequest(content="x", timestamp=datetime(1970, 1, 1))


def test_create_entry_runs_binary():
    client = DayOneCLI(binary="/usr/local/bin/dayone2", timeout=5)
    request = DayOneEntryRequest(content="Hello", journal="Journal")
    completed = SimpleNamespace(returncode=0, stdout="Created new entry with uuid: ABC\n", stderr="")

    with patch("moodbridge.data_transfer.dayone.dayone_cli.subprocess.run", return_value=completed) as mock_run:
        output = client.create_entry(request, source="ML 1.md")

    assert output == "Created new entry with uuid: ABC"
    args, kwargs = mock_run.call_args
    assert args[0] == ["/usr/local/bin/dayone2", "--journal", "Journal", "--", "new", "Hello"]
    assert kwargs["timeout"] == 5
    assert kwargs["capture_output"] is True


def test_create_entry_nonzero_exit():
    client = DayOneCLI()
    completed = SimpleNamespace(returncode=3, stdout="", stderr="journal not found\n")

    with patch("moodbridge.data_transfer.dayone.dayone_cli.subprocess.run", return_value=completed):
        with pytest.raises(DayOneCommandError) as exc_info:
            client.create_entry(DayOneEntryRequest(content="Hello"))

    assert exc_info.value.returncode == 3
    assert exc_info.value.stderr == "journal not found"


def test_create_entry_missing_binary():
    client = DayOneCLI(binary="does-not-exist-dayone2")

    with patch("moodbridge.data_transfer.dayone.dayone_cli.subprocess.run", side_effect=FileNotFoundError()):
        with pytest.raises(DayOneCommandError, match="not found"):
            client.create_entry(DayOneEntryRequest(content="Hello"))


def test_create_entry_timeout():
    client = DayOneCLI(timeout=1)

    with patch(
        "moodbridge.data_transfer.dayone.dayone_cli.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd="dayone2", timeout=1),
    ):
        with pytest.raises(DayOneCommandError, match="timed out"):
            client.create_entry(DayOneEntryRequest(content="Hello"))
