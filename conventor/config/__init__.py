"""
Compiler configuration: dataclass defaults, YAML overrides and validation.
"""
