import os
import stat
import sys
from pathlib import Path

import pytest

from dirsure.cli import main


@pytest.mark.parametrize("extra", [[], ["--async"]])
def test_cli_creates_directory_and_prints_context(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    extra: list[str],
) -> None:
    main(["a/b", "--cwd", str(tmp_path), *extra])

    assert (tmp_path / "a" / "b").is_dir()
    assert capsys.readouterr().out.strip() == str(tmp_path / "a" / "b")


def test_cli_absent_prints_base_context(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "gone" / "child").mkdir(parents=True)

    main(["gone", "--absent", "--cwd", str(tmp_path)])

    assert not (tmp_path / "gone").exists()
    assert capsys.readouterr().out.strip() == str(tmp_path)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_cli_empty_with_mode(tmp_path: Path) -> None:
    (tmp_path / "d" / "child").mkdir(parents=True)

    main(["d", "--empty", "--mode", "711", "--cwd", str(tmp_path)])

    assert stat.S_IMODE(os.stat(tmp_path / "d").st_mode) == 0o711
    assert not (tmp_path / "d" / "child").exists()


def test_cli_layout_is_relative_to_layout_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    layout_path = tmp_path / "layout.yaml"
    layout_path.write_text("directories:\n  - path: one\n  - path: two/three\n", encoding="utf-8")

    main(["--layout", str(layout_path)])

    assert capsys.readouterr().out.splitlines() == [
        os.path.join(str(layout_path.resolve().parent), "one"),
        os.path.join(str(layout_path.resolve().parent), "two", "three"),
    ]


def test_cli_invalid_mode_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["x", "--mode", "rwx", "--cwd", str(tmp_path)])

    assert exc.value.code == 2
    assert "Invalid permission mode" in capsys.readouterr().err
    assert not (tmp_path / "x").exists()


@pytest.mark.parametrize("argv", [[], ["x", "--layout", "layout.yaml"]])
def test_cli_requires_exactly_one_target(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv)

    assert exc.value.code == 2
