from __future__ import annotations

from typing import Dict, Tuple

# Logical PADRINO tables, in the order they are loaded, merged and exported.
# Both workbooks expose one sheet per name.
PDB_TABLES: Tuple[str, ...] = (
    "Metadata",
    "StateVariables",
    "DiscreteStates",
    "ContinuousDomains",
    "IntegrationRules",
    "StateVectors",
    "IpmKernels",
    "VitalRateExpr",
    "ParameterValues",
    "EnvironmentalVariables",
    "HierarchTable",
    "UncertaintyTable",
    "TestTargets",
)

# Export-time file names that differ from the in-memory table name.
EXPORT_RENAMES: Dict[str, str] = {
    "HierarchTable": "ParSetIndices",
}

METADATA_TABLE = "Metadata"

# Only the hand-curated workbook tracks this flag natively.
TEST_PASSED_COLUMN = ".test_passed"

# Placeholder text used in the workbooks, and the on-disk missing marker.
SENTINEL = "NA"

# Logical tokens understood by the downstream R interface.
BOOLEAN_TOKENS: Dict[bool, str] = {True: "TRUE", False: "FALSE"}
