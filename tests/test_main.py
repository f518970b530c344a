import pytest

from phrasegen import main as cli
from phrasegen.main import SAMPLE_WARNING, build_parser, resolve_settings
from phrasegen.config import Settings


class CopyRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, text, wait):
        self.calls.append((text, wait))


@pytest.fixture
def recorder(monkeypatch):
    rec = CopyRecorder()
    monkeypatch.setattr(cli, "copy_then_clear", rec)
    return rec


def test_main_copies_passphrase_to_clipboard(recorder, wordlist_file):
    code = cli.main([
        "-p", str(wordlist_file), "-l", "3", "-s", "-", "--sl", "0", "-c", "uppercase", "-w", "0",
    ])

    assert code == 0
    assert len(recorder.calls) == 1
    text, wait = recorder.calls[0]
    assert wait == 0
    words = text.split("-")
    assert len(words) == 3
    assert all(word.lower() in ("abacus", "abdomen", "abdominal", "abide") for word in words)
    assert all(word.isupper() for word in words)


def test_main_uses_settings_defaults(recorder):
    assert cli.main([]) == 0

    text, wait = recorder.calls[0]
    assert wait == 5
    assert len(text.split(" ")) == 7
    assert sum(ch.isdigit() for ch in text) == 1


def test_main_info_prints_sample_and_entropy(recorder, wordlist_file, capsys):
    code = cli.main(["-i", "-p", str(wordlist_file), "-l", "2", "--sl", "0"])

    out = capsys.readouterr().out
    assert code == 0
    assert recorder.calls == []
    assert SAMPLE_WARNING in out
    assert "Sample: " in out
    # 4 words, 2 long: log2(16) = 4 bits
    assert "Entropy: 4.00" in out
    assert "equivalent to a 0.57-character password" in out


def test_main_accepts_legacy_case_codes(recorder, wordlist_file):
    assert cli.main(["-p", str(wordlist_file), "-c", "0", "--sl", "0", "-l", "2"]) == 0

    assert recorder.calls[0][0].islower()


def test_main_rejects_unknown_case(recorder, capsys):
    assert cli.main(["-c", "7"]) == 1

    assert "CASE" in capsys.readouterr().err
    assert recorder.calls == []


def test_main_rejects_zero_length(recorder, capsys):
    assert cli.main(["-l", "0"]) == 1

    assert "LENGTH" in capsys.readouterr().err


def test_main_reports_missing_wordlist(recorder, tmp_path, capsys):
    assert cli.main(["-p", str(tmp_path / "missing.txt")]) == 1

    assert "Initialization error" in capsys.readouterr().err
    assert recorder.calls == []


def test_resolve_settings_overlays_only_given_options():
    args = build_parser().parse_args(["--sc", "!?", "-w", "0"])
    base = Settings(LENGTH=4)

    settings = resolve_settings(args, base)

    assert settings.SALT_CHARS == "!?"
    assert settings.WAIT == 0
    assert settings.LENGTH == 4
    assert settings.SEPARATOR == " "
