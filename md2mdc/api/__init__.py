"""md2mdc API layer.

Every command returns a StageResult; the CLI only renders it.
"""
