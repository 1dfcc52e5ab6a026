import subprocess
from unittest.mock import patch

from chatexport.converter import Converter, heic_to_jpeg, program_exists


def test_can_find_program():
    assert program_exists("ls")


def test_can_miss_program():
    assert not program_exists("fake_name")


def _only(name):
    return lambda program: f"/usr/bin/{program}" if program == name else None


def test_determine_prefers_sips():
    with patch("chatexport.converter.shutil.which", side_effect=lambda p: f"/bin/{p}"):
        assert Converter.determine() is Converter.SIPS


def test_determine_falls_back_to_imagemagick():
    with patch("chatexport.converter.shutil.which", side_effect=_only("convert")):
        assert Converter.determine() is Converter.IMAGEMAGICK


def test_determine_none(capsys):
    with patch("chatexport.converter.shutil.which", return_value=None):
        assert Converter.determine() is None
    assert "No HEIC converter found" in capsys.readouterr().err


def test_sips_command_and_dirs(tmp_path):
    source = tmp_path / "in.heic"
    target = tmp_path / "a" / "b" / "out.jpg"
    with patch("chatexport.converter.subprocess.run") as run:
        heic_to_jpeg(source, target, Converter.SIPS)
    assert target.parent.is_dir()
    args = run.call_args.args[0]
    assert args == ["sips", "-s", "format", "jpeg", str(source), "-o", str(target)]
    assert run.call_args.kwargs["stdin"] == subprocess.DEVNULL


def test_imagemagick_command(tmp_path):
    source = tmp_path / "in.heic"
    target = tmp_path / "out.jpg"
    with patch("chatexport.converter.subprocess.run") as run:
        heic_to_jpeg(source, target, Converter.IMAGEMAGICK)
    assert run.call_args.args[0] == ["convert", str(source), str(target)]


def test_spawn_failure_is_reported(tmp_path, capsys):
    with patch("chatexport.converter.subprocess.run", side_effect=FileNotFoundError("gone")):
        heic_to_jpeg(tmp_path / "in.heic", tmp_path / "out.jpg", Converter.SIPS)
    assert "Conversion failed" in capsys.readouterr().err