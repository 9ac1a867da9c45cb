"""Default configuration parameters for the bidding-system compiler."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class ExpansionParams:
    """Wildcard binding and step splicing parameters."""
    # Suit choices offered per wildcard dimension
    major_suits: tuple[str, ...] = ("H", "S")          # 1M, 2M, ...
    minor_suits: tuple[str, ...] = ("C", "D")          # 1m, 2m, ...
    any_suits: tuple[str, ...] = ("C", "D", "H", "S")  # 1X, 2X, ...

    # Relay responses spliced from steps are alerted
    relay_alertable: bool = True


@dataclass(frozen=True)
class PruneParams:
    """Tree pruning parameters."""
    prune_illegal: bool = True         # Drop auctions the validator rejects
    prune_empty: bool = True           # Drop leaves with no description


@dataclass(frozen=True)
class RenderParams:
    """Plain-data rendering parameters."""
    suit_symbols: bool = False         # 1♣ instead of 1C in call text
    sequence_separator: str = "-"


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters passed to configure_logging."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    expansion: ExpansionParams
    prune: PruneParams
    render: RenderParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        expansion=ExpansionParams(),
        prune=PruneParams(),
        render=RenderParams(),
        logging=LoggingParams(),
    )


def config_from_dict(config: dict[str, Any]) -> DefaultConfig:
    """Build a DefaultConfig from a merged configuration dictionary.

    Unknown sections and keys are ignored; YAML lists are turned back into
    tuples so the result stays hashable.
    """
    sections = {
        "expansion": ExpansionParams,
        "prune": PruneParams,
        "render": RenderParams,
        "logging": LoggingParams,
    }

    built = {}
    for section_name, params_cls in sections.items():
        section = config.get(section_name) or {}
        known = {f.name for f in fields(params_cls)}
        kwargs = {}
        for key, value in section.items():
            if key not in known:
                continue
            kwargs[key] = tuple(value) if isinstance(value, list) else value
        built[section_name] = params_cls(**kwargs)

    return DefaultConfig(**built)
