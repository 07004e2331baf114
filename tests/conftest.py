import sys
from pathlib import Path
from typing import Dict, List, Mapping

import pandas as pd
import pytest

# Make project root importable
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.schema import PDB_TABLES, TEST_PASSED_COLUMN  # noqa: E402

SMALL_REGISTRY = ("Metadata", "ParameterValues", "HierarchTable")


def write_workbook(path: Path, tables: Mapping[str, pd.DataFrame]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for name, df in tables.items():
            df.to_excel(writer, sheet_name=name, index=False)
    return path


def primary_tables() -> Dict[str, pd.DataFrame]:
    return {
        "Metadata": pd.DataFrame(
            {
                "ipm_id": ["aaaa11", "aaaa12", "aaaa13"],
                "species_accepted": ["Carex humilis", "Nardus stricta", "Silene acaulis"],
                "lat": [45.1, 50.2, 33.3],
                TEST_PASSED_COLUMN: [True, False, True],
            }
        ),
        "ParameterValues": pd.DataFrame(
            {
                "ipm_id": ["aaaa11", "aaaa12"],
                "parameter_name": ["s_int", "s_slope"],
                "parameter_value": [0.5, 1.25],
            }
        ),
        "HierarchTable": pd.DataFrame(
            {
                "ipm_id": ["aaaa11"],
                "par_set": ["yr"],
                "levels": ["2001:2004"],
            }
        ),
    }


def secondary_tables() -> Dict[str, pd.DataFrame]:
    return {
        "Metadata": pd.DataFrame(
            {
                "ipm_id": ["bbbb21", "bbbb22"],
                "species_accepted": ["Plantago NA major", "Poa annua"],
                "lat": [12.5, "NA"],
            }
        ),
        "ParameterValues": pd.DataFrame(
            {
                "ipm_id": ["bbbb21"],
                "parameter_name": ["g_sd"],
                "parameter_value": ["NA"],
            }
        ),
        "HierarchTable": pd.DataFrame(
            {
                "ipm_id": ["bbbb22", "bbbb22"],
                "par_set": ["site", "yr"],
                "levels": ["a,b", "1:3"],
            }
        ),
    }


def full_registry_tables(prefix: str, with_flag: bool) -> Dict[str, pd.DataFrame]:
    tables = {}
    for name in PDB_TABLES:
        tables[name] = pd.DataFrame({"ipm_id": [f"{prefix}01", f"{prefix}02"], "value": ["x", "NA"]})
    if with_flag:
        tables["Metadata"][TEST_PASSED_COLUMN] = [True, True]
    return tables


@pytest.fixture
def workbooks(tmp_path):
    primary = write_workbook(tmp_path / "xl" / "primary.xlsx", primary_tables())
    secondary = write_workbook(tmp_path / "xl" / "secondary.xlsx", secondary_tables())
    return primary, secondary


def list_outputs(output_dir: Path) -> List[str]:
    """Names of the files currently in `output_dir`, sorted."""
    return sorted(p.name for p in Path(output_dir).iterdir() if p.is_file())
