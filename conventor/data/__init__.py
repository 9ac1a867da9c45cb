"""
Document ingestion module.

Turns an already-parsed generic document (nested mappings, sequences and
scalars) into a convention tree of raw notation, and loads such documents
and section indexes from YAML files.
"""
