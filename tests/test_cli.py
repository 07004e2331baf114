import logging
import zipfile

from conftest import full_registry_tables, write_workbook
from app.build_flat_sheets import main
from core.config import DEFAULT_OUTPUT_DIR, DEFAULT_PRIMARY_PATH, DEFAULT_SECONDARY_PATH, BuildConfig
from core.schema import PDB_TABLES


def test_main_builds_every_registry_table(tmp_path):
    write_workbook(tmp_path / DEFAULT_PRIMARY_PATH, full_registry_tables("aaaa", with_flag=True))
    write_workbook(tmp_path / DEFAULT_SECONDARY_PATH, full_registry_tables("bbbb", with_flag=False))

    assert main(["--root", str(tmp_path)]) == 0

    files = sorted(p.name for p in (tmp_path / DEFAULT_OUTPUT_DIR).iterdir())
    expected = sorted(BuildConfig().export_name(t) for t in PDB_TABLES)
    assert files == expected
    assert "ParSetIndices.txt" in files


def test_main_reports_failure(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["--root", str(tmp_path)]) == 1
    assert "Build failed during load" in caplog.text


def test_for_root_resolves_paths(tmp_path):
    cfg = BuildConfig.for_root(tmp_path)
    assert cfg.primary_path == tmp_path / DEFAULT_PRIMARY_PATH
    assert cfg.output_dir == tmp_path / DEFAULT_OUTPUT_DIR
    assert cfg.export_name("HierarchTable") == "ParSetIndices.txt"
    assert cfg.export_name("Metadata") == "Metadata.txt"


def test_config_is_hashable():
    cfg = BuildConfig()
    assert hash(cfg) == hash(BuildConfig())
    assert cfg.rename_map == {"HierarchTable": "ParSetIndices"}


def test_main_reports_unreadable_workbook(tmp_path, caplog):
    path = tmp_path / DEFAULT_PRIMARY_PATH
    path.parent.mkdir(parents=True)
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("hello.txt", "x")

    with caplog.at_level(logging.ERROR):
        assert main(["--root", str(tmp_path)]) == 1
    assert "Build failed during load" in caplog.text
