"""Tests for the clipboard bridge; subprocess is always mocked."""
import subprocess
from unittest import mock

import pytest

from hexpass.core.errors import ClipboardError
from hexpass.output.clipboard import NullClipboard, SystemClipboard


def _completed(returncode):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout="", stderr="")


@pytest.fixture
def run():
    with mock.patch("hexpass.output.clipboard.subprocess.run") as patched:
        yield patched


@pytest.mark.parametrize("platform,tool", [("darwin", "pbcopy"), ("win32", "clip")])
def test_single_tool_platforms(run, platform, tool):
    run.return_value = _completed(0)
    SystemClipboard(platform=platform).copy("cafe")
    run.assert_called_once()
    args, kwargs = run.call_args
    assert args[0] == [tool]
    assert kwargs["input"] == "cafe"


@pytest.mark.parametrize("platform,tool", [("darwin", "pbcopy"), ("win32", "clip")])
def test_single_tool_nonzero_exit(run, platform, tool):
    run.return_value = _completed(1)
    with pytest.raises(ClipboardError) as exc:
        SystemClipboard(platform=platform).copy("cafe")
    assert str(exc.value) == f"Failed to copy to clipboard using {tool}."


def test_single_tool_missing_binary(run):
    run.side_effect = FileNotFoundError("pbcopy")
    with pytest.raises(ClipboardError) as exc:
        SystemClipboard(platform="darwin").copy("cafe")
    assert str(exc.value) == "Failed to copy to clipboard using pbcopy."


def test_linux_prefers_xclip(run):
    run.return_value = _completed(0)
    SystemClipboard(platform="linux").copy("cafe")
    run.assert_called_once()
    assert run.call_args.args[0] == ["xclip", "-selection", "clipboard"]


def test_linux_falls_back_to_xsel(run):
    run.side_effect = [FileNotFoundError("xclip"), _completed(0)]
    SystemClipboard(platform="linux").copy("cafe")
    assert [c.args[0][0] for c in run.call_args_list] == ["xclip", "xsel"]
    assert run.call_args.args[0] == ["xsel", "--clipboard", "--input"]


def test_linux_nothing_works(run):
    run.side_effect = [_completed(1), FileNotFoundError("xsel")]
    with pytest.raises(ClipboardError) as exc:
        SystemClipboard(platform="freebsd14").copy("cafe")
    assert str(exc.value) == (
        "Clipboard copy not supported on this system. Install xclip or xsel."
    )


def test_custom_linux_commands(run):
    run.return_value = _completed(0)
    SystemClipboard(platform="linux", linux_commands=[["wl-copy"]]).copy("cafe")
    assert run.call_args.args[0] == ["wl-copy"]


def test_no_timeout_imposed(run):
    run.return_value = _completed(0)
    SystemClipboard(platform="darwin").copy("cafe")
    assert "timeout" not in run.call_args.kwargs


def test_null_clipboard_records():
    clipboard = NullClipboard()
    clipboard.copy("one")
    clipboard.copy("two")
    assert clipboard.copied == ["one", "two"]
