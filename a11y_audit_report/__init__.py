"""a11y_audit_report

Turns accessibility scan artifacts into a single self-contained HTML report.

Primary entrypoints:
 - cli.py (Typer CLI)
 - axe_log.py (axe-core CLI text log parsing)
 - lighthouse.py / manual.py / screen_reader.py (input loaders)
 - report.py (HTML report rendering)
"""

__all__ = [
    "axe_log",
    "lighthouse",
    "manual",
    "report",
]
