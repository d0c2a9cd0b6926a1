import json

from imgpack import cli


def test_run_with_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "resources").mkdir()
    (tmp_path / "resources" / "1.avif").write_bytes(b"")

    assert cli.main([]) == 0

    images = json.loads((tmp_path / "out" / "image_base85.json").read_text())
    assert images == {"images": [{"1": ""}]}


def test_options_override_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pics").mkdir()
    (tmp_path / "pics" / "7.png").write_bytes(b"7")
    (tmp_path / "imgpack.toml").write_text('[scan]\ninput_root = "pics"\n\n[output]\noutput_root = "from_config"\n')

    assert cli.main(["-e", "png", "-o", str(tmp_path / "result")]) == 0

    hashes = json.loads((tmp_path / "result" / "image_hash.json").read_text())
    assert list(hashes["hashes"][0]) == ["7"]
    assert not (tmp_path / "from_config").exists()


def test_invalid_config_exits_12(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.toml").write_text('[scan]\nunknown = 1\n')

    assert cli.main(["-c", "bad.toml"]) == 12

    captured = capsys.readouterr()
    assert captured.err.startswith("*** ERROR *** run aborted.")
    assert "configuration" in captured.err
    assert not (tmp_path / "out").exists()


def test_explicit_config_must_exist(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert cli.main(["--config", "missing.toml"]) == 12
    assert "missing.toml" in capsys.readouterr().err


def test_write_error_exits_12(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "out").write_text("")

    assert cli.main([]) == 12
    assert "could not be written" in capsys.readouterr().err
