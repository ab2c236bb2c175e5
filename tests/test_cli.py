import pytest
from typer.testing import CliRunner

from clipwatch import cli
from clipwatch.clipboard import InMemoryClipboard
from clipwatch.models.payload import TextPayload

runner = CliRunner()


@pytest.fixture
def fake_clipboard(monkeypatch) -> InMemoryClipboard:
    """Replace the system clipboard used by the CLI with an in-memory one."""
    clipboard = InMemoryClipboard(TextPayload(text="copied from the test"))
    monkeypatch.setattr(cli, "SystemClipboard", lambda logger=None: clipboard)
    return clipboard


class TestWatchCommand:
    def test_prints_history(self, fake_clipboard):
        """A single poll prints the recorded entry."""
        result = runner.invoke(cli.app, ["watch", "--cycles", "1", "--interval", "0.01"])
        assert result.exit_code == 0, result.output
        assert "Clipboard History" in result.output
        assert "copied from the test" in result.output
        assert "Stopped." in result.output

    def test_nothing_printed_when_unchanged(self, fake_clipboard):
        """Repeated polls of the same content print the table once."""
        result = runner.invoke(cli.app, ["watch", "--cycles", "3", "--interval", "0.01"])
        assert result.exit_code == 0, result.output
        assert result.output.count("Clipboard History") == 1

    def test_empty_clipboard(self, fake_clipboard):
        fake_clipboard.clear()
        result = runner.invoke(cli.app, ["watch", "--cycles", "1", "--interval", "0.01"])
        assert result.exit_code == 0, result.output
        assert "Clipboard History" not in result.output

    def test_rejects_negative_capacity(self, fake_clipboard):
        result = runner.invoke(cli.app, ["watch", "--capacity", "-1", "--cycles", "1"])
        assert result.exit_code != 0


class TestSettingsCommand:
    def test_shows_resolved_settings(self, monkeypatch):
        """Environment overrides are reflected in the printed settings."""
        monkeypatch.setenv("CLIPWATCH_CAPACITY", "12")
        result = runner.invoke(cli.app, ["settings"])
        assert result.exit_code == 0, result.output
        assert "capacity" in result.output
        assert "12" in result.output
        assert "preview_height" in result.output
