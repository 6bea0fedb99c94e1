"""
Package marker for the chart geometry core under `src.charts`.
It groups the primitives, geometry helpers, and the line, bar, and pie renderers under one import path.
Most functionality lives in the sibling modules; this file intentionally stays lightweight.
"""
