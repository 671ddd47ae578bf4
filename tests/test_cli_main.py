from __future__ import annotations

from PIL import Image
import pytest

from cli.main import main


def test_writes_grayscale_png(tmp_path, capsys) -> None:
    out_path = tmp_path / "maps" / "terrain.png"
    code = main(["--seed", "42", "--w", "4", "--h", "2", "--iterations", "3", "--out", str(out_path)])
    assert code == 0

    with Image.open(out_path) as image:
        assert image.mode == "L"
        assert image.size == (33, 17)

    output = capsys.readouterr().out
    assert "Size: 33x17" in output
    assert str(out_path) in output


def test_midpoint_mode_writes_single_row(tmp_path) -> None:
    out_path = tmp_path / "line.png"
    assert main(["--mode", "midpoint", "--w", "3", "--iterations", "2", "--out", str(out_path)]) == 0

    with Image.open(out_path) as image:
        assert image.size == (13, 1)


def test_existing_output_requires_overwrite(tmp_path) -> None:
    out_path = tmp_path / "terrain.png"
    args = ["--out", str(out_path)]
    assert main(args) == 0

    with pytest.raises(FileExistsError):
        main(args)
    assert main(args + ["--overwrite"]) == 0


def test_invalid_roughness_is_a_usage_error(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--roughness", "0.9", "--out", str(tmp_path / "x.png")])

    assert exc.value.code == 2
    assert "roughness" in capsys.readouterr().err
    assert not (tmp_path / "x.png").exists()


def test_verbose_logs_each_pass(tmp_path, caplog) -> None:
    caplog.set_level("DEBUG", logger="fractal_terrain")
    assert main(["--iterations", "2", "--verbose", "--out", str(tmp_path / "t.png")]) == 0

    passes = [r for r in caplog.records if "pass" in r.getMessage()]
    assert len(passes) == 2
