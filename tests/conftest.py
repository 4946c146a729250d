import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


@pytest.fixture
def metadata_rows():
    return pd.DataFrame(
        {
            "KVI": ["Members", "Revenue", "Completion %", "Growth"],
            "Info": ["Active members.", "Annual revenue in USD.", "Share of milestones met.", None],
            "Unit": ["Count", "USD", "Completion %", "times"],
        }
    )


@pytest.fixture
def value_rows():
    return pd.DataFrame(
        {
            "Organization Name": ["Alpha", "Beta", "Gamma"],
            "Members": [100, 200, None],
            "Revenue": [1000, "abc", 3000],
            "Completion %": [0.5, 0.7, None],
            "Growth": [1.5, 2.5, 3.5],
        }
    ).astype(object)
