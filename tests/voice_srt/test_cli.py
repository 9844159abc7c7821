import json
import logging

import pytest
from typer.testing import CliRunner

from services.voice_srt import __version__, cli
from shared.config import settings

runner = CliRunner()


def test_builds_subtitles(make_pair, tmp_path):
    make_pair("000", 7.288, "A")
    voice = make_pair("001", 6.434, "B")
    out = tmp_path / "out.srt"

    result = runner.invoke(cli.app, ["-i", str(voice), "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == (
        "1\n00:00:00,000 --> 00:00:07,288\nA\n\n"
        "2\n00:00:07,288 --> 00:00:13,722\nB"
    )
    assert str(out) in result.output


def test_default_output_path_comes_from_settings(make_pair, tmp_path, monkeypatch):
    voice = make_pair("000", 1.0, "A")
    default = tmp_path / "subtitles.srt"
    monkeypatch.setattr(settings, "OUTPUT_PATH", default)

    result = runner.invoke(cli.app, ["--input-path", str(voice)])

    assert result.exit_code == 0, result.output
    assert default.exists()


def test_only_text_files_aborts_without_output(tmp_path):
    src = tmp_path / "voice"
    src.mkdir()
    (src / "000.txt").write_text("A")
    out = tmp_path / "out.srt"

    result = runner.invoke(cli.app, ["-i", str(src), "-o", str(out)])

    assert result.exit_code == 3
    assert "MissingAudio" in result.output
    assert not out.exists()


def test_unpaired_prefix_aborts(voice_dir, write_wav, make_pair, tmp_path):
    make_pair("001", 1.0, "B")
    write_wav(voice_dir / "000.wav", 16000)
    (voice_dir / "009.txt").write_text("stray")
    out = tmp_path / "out.srt"

    result = runner.invoke(cli.app, ["-i", str(voice_dir), "-o", str(out)])

    assert result.exit_code == 6
    assert "UnpairedBlock" in result.output
    assert not out.exists()


@pytest.mark.parametrize(
    "setup,code,kind",
    [
        ("missing", 2, "PathNotFound"),
        ("mismatch", 5, "CountMismatch"),
    ],
)
def test_error_exit_codes(tmp_path, write_wav, setup, code, kind, caplog):
    src = tmp_path / "voice"
    if setup == "mismatch":
        src.mkdir()
        for stem in ("000", "001", "002"):
            write_wav(src / f"{stem}.wav", 160)
        for stem in ("000", "001"):
            (src / f"{stem}.txt").write_text(stem)
    caplog.set_level(logging.ERROR)

    result = runner.invoke(cli.app, ["-i", str(src), "-o", str(tmp_path / "out.srt")])

    assert result.exit_code == code
    assert kind in result.output
    err = json.loads(caplog.records[-1].message)
    assert err["event"] == "error"
    assert err["kind"] == kind


def test_unwritable_destination(make_pair, tmp_path):
    voice = make_pair("000", 1.0, "A")

    result = runner.invoke(
        cli.app, ["-i", str(voice), "-o", str(tmp_path / "nope" / "out.srt")]
    )

    assert result.exit_code == 10
    assert "WriteError" in result.output


def test_input_path_is_required():
    result = runner.invoke(cli.app, [])

    assert result.exit_code != 0


def test_version():
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
