"""
UX technique recommendation engine.

Responsibilities:
- Load the static technique catalog once and keep it immutable.
- Match a project requirement against every catalog entry.
- Bucket matching techniques into the five design-process stages.
"""
