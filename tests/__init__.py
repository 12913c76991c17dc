"""Initialize the test environment."""

import sys
from pathlib import Path

# Put the repository root on the path so `aligner` and `scripts` import without installing
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
