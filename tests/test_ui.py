from rustlings.ui import no_emoji, success, warn


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = warn("careful")
    assert line == "! careful"
    assert capsys.readouterr().out == "! careful\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = success("all good")
    assert line == "✓ all good"
    assert "✓ all good" in capsys.readouterr().out


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = warn("careful")
    assert line.startswith("⚠️")
    assert line.endswith(" careful")
    assert line in capsys.readouterr().out


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = success("all good")
    assert line == "✅ all good"
    assert "all good" in capsys.readouterr().out