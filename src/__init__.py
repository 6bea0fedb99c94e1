"""
Package marker for source code under `src`.
It groups the chart core (`src.charts`), the HTTP layer (`src.api`), and shared settings (`src.common`).
Most functionality lives in the subpackages; this file intentionally stays lightweight.
"""
