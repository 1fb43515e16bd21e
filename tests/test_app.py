"""Tests for the command-line entry point."""

from __future__ import annotations

import json
import logging
from unittest import mock

import pytest

from ctcopy.app import build_parser, main
from ctcopy.config import DEFAULT_CONFIG, load_config


@pytest.fixture(autouse=True)
def default_config():
    with mock.patch("ctcopy.app.load_config", return_value=dict(DEFAULT_CONFIG)) as m:
        yield m


@pytest.fixture
def mock_clip():
    with mock.patch("ctcopy.app.copy_to_clipboard", return_value=True) as m:
        yield m


@pytest.fixture
def mock_notify():
    with mock.patch("ctcopy.app.notify", return_value=True) as m:
        yield m


@pytest.fixture
def files(tmp_path):
    a = tmp_path / "a.txt"
    a.write_text("x\ny\nz", encoding="utf-8")
    b = tmp_path / "b.txt"
    b.write_text("p\nq", encoding="utf-8")
    return str(a), str(b)


class TestParser:
    def test_flags(self):
        args = build_parser().parse_args(["-l", "3", "-line", "1,2", "-w", "-s", "f.txt"])
        assert args.line == 3
        assert args.lines == "1,2"
        assert args.strip is True
        assert args.silent is True
        assert args.files == ["f.txt"]

    def test_long_line_option(self):
        args = build_parser().parse_args(["--line", "4", "f.txt"])
        assert args.lines == "4"

    def test_defaults(self):
        args = build_parser().parse_args(["f.txt"])
        assert args.line == 0
        assert args.lines == ""
        assert args.strip is False
        assert args.silent is False
        assert args.verify is False


class TestMain:
    def test_no_files_prints_usage(self, capsys, mock_clip):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "usage: ctcopy" in capsys.readouterr().err
        mock_clip.assert_not_called()

    def test_copies_whole_files(self, files, capsys, mock_clip, mock_notify):
        main(list(files))
        mock_clip.assert_called_once_with("x\ny\nz\n\np\nq")
        assert capsys.readouterr().out == "Successfully copied 2 file(s) to clipboard\n"
        mock_notify.assert_called_once_with(
            "Clipboard Manager", "Successfully copied 2 file(s) to clipboard", timeout=3.0
        )

    def test_single_line(self, files, mock_clip, mock_notify):
        main(["-l", "2", files[0]])
        mock_clip.assert_called_once_with("2. y")

    def test_line_list_without_numbers(self, files, mock_clip, mock_notify):
        main(["-w", "-line", "3,1", files[0]])
        mock_clip.assert_called_once_with("x\nz")

    def test_single_line_overrides_list(self, files, mock_clip, mock_notify):
        main(["-l", "1", "-line", "2,3", files[0]])
        mock_clip.assert_called_once_with("1. x")

    @pytest.mark.parametrize("value", ["1,abc", "-2", "0", "-1,2", "1_0"])
    def test_bad_line_list_fails_before_reading(self, value, files, caplog, mock_clip):
        with mock.patch("ctcopy.app.collect") as mock_collect:
            with pytest.raises(SystemExit) as exc:
                main(["-line", value, files[0]])
        assert exc.value.code == 1
        assert "Error parsing line numbers" in caplog.text
        mock_collect.assert_not_called()
        mock_clip.assert_not_called()

    def test_leading_negative_in_list(self, files, caplog, mock_clip):
        with pytest.raises(SystemExit) as exc:
            main(["-line", "-1,2", files[0]])
        assert exc.value.code == 1
        assert "Error parsing line numbers: line number must be positive: -1" in caplog.text
        mock_clip.assert_not_called()

    def test_negative_single_line_is_ignored(self, files, mock_clip, mock_notify):
        main(["-l", "-3", "-line", "2", files[0]])
        mock_clip.assert_called_once_with("2. y")

    def test_words_after_double_dash_are_files(self, files, mock_clip, mock_notify):
        main(["--", files[0]])
        mock_clip.assert_called_once_with("x\ny\nz")

    def test_wrong_config_types_use_defaults(self, files, tmp_path, default_config, mock_clip, mock_notify):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"notification_timeout": "soon", "encoding": 5}))
        with mock.patch("ctcopy.config.get_config_path", return_value=config_file):
            default_config.side_effect = load_config
            main([files[0]])
        mock_clip.assert_called_once_with("x\ny\nz")
        mock_notify.assert_called_once_with(
            "Clipboard Manager", "Successfully copied 1 file(s) to clipboard", timeout=3.0
        )

    def test_partial_failure(self, files, tmp_path, capsys, mock_clip, mock_notify):
        missing = str(tmp_path / "missing.txt")
        main([files[0], missing])

        mock_clip.assert_called_once_with("x\ny\nz")
        assert capsys.readouterr().out == (
            "Successfully copied 1 file(s) to clipboard (1 failed)\n"
        )
        assert mock_notify.call_count == 2
        error_call = mock_notify.call_args_list[0]
        assert error_call[0][0] == "Error"
        assert error_call[0][1].startswith(f"Error reading '{missing}'")

    def test_all_files_fail(self, tmp_path, caplog, mock_clip, mock_notify):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "nope.txt")])
        assert exc.value.code == 1
        assert "No files were successfully read" in caplog.text
        mock_clip.assert_not_called()
        # One error notification, no summary.
        assert mock_notify.call_count == 1

    def test_selection_past_end_fails(self, files, caplog, mock_clip, mock_notify):
        with pytest.raises(SystemExit):
            main(["-l", "100", files[1]])
        assert "no lines found" in caplog.text
        mock_clip.assert_not_called()

    def test_clipboard_failure(self, files, capsys, caplog, mock_notify):
        with mock.patch("ctcopy.app.copy_to_clipboard", return_value=False):
            with pytest.raises(SystemExit) as exc:
                main([files[0]])
        assert exc.value.code == 1
        assert "Failed to copy to clipboard" in caplog.text
        assert capsys.readouterr().out == ""
        mock_notify.assert_not_called()

    def test_silent(self, files, tmp_path, mock_clip, mock_notify):
        main(["-s", files[0], str(tmp_path / "missing.txt")])
        mock_notify.assert_not_called()

    def test_notifications_disabled_in_config(self, files, default_config, mock_clip, mock_notify):
        default_config.return_value = dict(DEFAULT_CONFIG, notification_enabled=False)
        main([files[0]])
        mock_notify.assert_not_called()

    def test_configured_title_and_timeout(self, files, default_config, mock_clip, mock_notify):
        default_config.return_value = dict(
            DEFAULT_CONFIG, notification_title="ct", notification_timeout=5
        )
        main([files[0]])
        mock_notify.assert_called_once_with(
            "ct", "Successfully copied 1 file(s) to clipboard", timeout=5.0
        )

    def test_notification_failure_is_a_warning(self, files, capsys, caplog, mock_clip):
        with mock.patch("ctcopy.app.notify", return_value=False):
            with caplog.at_level(logging.WARNING):
                main([files[0]])
        assert "notification failed" in caplog.text
        assert "Successfully copied 1 file(s)" in capsys.readouterr().out

    def test_verify_match(self, files, caplog, mock_clip, mock_notify):
        with mock.patch("ctcopy.app.paste_from_clipboard", return_value="x\ny\nz") as mock_paste:
            main(["--verify", files[0]])
        mock_paste.assert_called_once()
        assert "do not match" not in caplog.text

    def test_verify_mismatch_is_not_fatal(self, files, capsys, caplog, mock_clip, mock_notify):
        with mock.patch("ctcopy.app.paste_from_clipboard", return_value=None):
            main(["--verify", files[0]])
        assert "clipboard contents do not match" in caplog.text
        assert "Successfully copied" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out.startswith("ctcopy ")
