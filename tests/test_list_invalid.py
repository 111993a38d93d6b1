from pathlib import Path

from codesort.list_invalid import EXCLUDED_DIRS, get_all_rust_files, main


def _make_tree(root: Path) -> None:
    (root / "a.rs").write_text("fn a() {}\n")
    (root / "notes.txt").write_text("not rust\n")
    (root / "sub").mkdir()
    (root / "sub" / "e.rs").write_text("fn e() {}\n")
    (root / "target").mkdir()
    (root / "target" / "c.rs").write_text("fn c() {}\n")
    (root / ".hidden").mkdir()
    (root / ".hidden" / "d.rs").write_text("fn d() {}\n")


def test_walk_skips_hidden_excluded_and_non_rust(tmp_path):
    _make_tree(tmp_path)
    files = get_all_rust_files(tmp_path)
    assert set(files) == {tmp_path / "a.rs", tmp_path / "sub" / "e.rs"}


def test_walk_includes_excluded_dir_on_demand(tmp_path):
    _make_tree(tmp_path)
    assert "target" in EXCLUDED_DIRS
    files = get_all_rust_files(tmp_path, ["target"])
    assert set(files) == {
        tmp_path / "a.rs",
        tmp_path / "sub" / "e.rs",
        tmp_path / "target" / "c.rs",
    }


def test_walk_never_includes_hidden_dirs(tmp_path):
    _make_tree(tmp_path)
    files = get_all_rust_files(tmp_path, [".hidden"])
    assert tmp_path / ".hidden" / "d.rs" not in files
    assert tmp_path / "a.rs" in files


def test_single_file_root_is_returned_whatever_its_extension(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello\n")
    assert get_all_rust_files(path) == [path]


def test_main_reports_counts(tmp_path, capsys):
    (tmp_path / "good.rs").write_text("fn good() {}\n")
    (tmp_path / "bad.rs").write_text("}\n")
    (tmp_path / "incomplete.rs").write_text("fn foo(\n")
    (tmp_path / "empty.rs").write_text("")
    assert main([str(tmp_path)]) == 0
    err = capsys.readouterr().err
    assert "Found 4 rust files" in err
    assert "OK files: 2" in err
    assert "Erroring files: 1" in err
    assert "Uncomplete files: 1" in err
    assert f"NOT COMPLETE {tmp_path / 'incomplete.rs'}" in err
    assert f"EMPTY {tmp_path / 'empty.rs'}" in err
    assert "Unexpected closing brace: }" in err


def test_main_does_not_modify_files(tmp_path):
    path = tmp_path / "lib.rs"
    text = "enum Foo {\n    B,\n    A,\n}\n"
    path.write_text(text)
    assert main([str(tmp_path)]) == 0
    assert path.read_text() == text