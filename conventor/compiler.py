"""
Main compiler coordinator.

Orchestrates the compilation pipeline, coordinating document ingestion,
expansion, merging and pruning of convention trees.
"""

from pathlib import Path
from typing import Any, Iterable, Optional, Union

import structlog

from .config.defaults import DefaultConfig, config_from_dict
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .conventions.expander import expand
from .conventions.macros import Macro
from .conventions.pruner import prune
from .conventions.tree import ConventionNode, SequenceItem, get_node
from .data.document import build_from_generic_document
from .data.loader import Section, build_from_yaml, load_sections
from .errors import ConfigurationError
from .logging.config import configure_logging
from .render.views import NodeView, iter_views

logger = structlog.get_logger(__name__)


class ConventionCompiler:
    """
    Main coordinator for the bidding-system compiler.

    Manages the compilation pipeline:
    Document → Raw Tree → Expansion → Merge → Prune → Views
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the compiler.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.logger = logger
        self.config_loader = ConfigLoader.create(config_dir)

        merged = self.config_loader.merge_config(overrides)
        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [
                f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors
            ]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError(
                "Invalid compiler configuration",
                errors=validation_errors,
                context={"config_dir": str(self.config_loader.config_dir)},
            )

        self.config: DefaultConfig = config_from_dict(merged)
        configure_logging(
            level=self.config.logging.level,
            format_json=self.config.logging.format_json,
        )

        self.logger.info(
            "Convention compiler initialized",
            config_dir=str(self.config_loader.config_dir),
        )

    def compile_tree(self, tree: ConventionNode) -> ConventionNode:
        """Expand and prune an already-built tree in place."""
        nodes_before = sum(1 for _ in tree.iter_nodes())

        expand(tree, self.config.expansion)
        nodes_expanded = sum(1 for _ in tree.iter_nodes())

        removed = prune(tree, self.config.prune)

        self.logger.info(
            "Convention tree compiled",
            nodes_declared=nodes_before,
            nodes_expanded=nodes_expanded,
            nodes_pruned=removed,
            nodes_final=nodes_expanded - removed,
        )
        return tree

    def compile_document(
        self, document: Any, global_macros: Optional[Iterable[Macro]] = None
    ) -> ConventionNode:
        """
        Compile a generic document into a concrete convention tree.

        Raises:
            MalformedDocumentError: If the document has an unrecognized shape
        """
        tree = build_from_generic_document(document, global_macros)
        return self.compile_tree(tree)

    def compile_file(
        self, path: Union[str, Path], global_macros: Optional[Iterable[Macro]] = None
    ) -> ConventionNode:
        """
        Compile a YAML convention file.

        Raises:
            MissingDocumentError: If the file does not exist
            MalformedDocumentError: If the file is not a valid convention document
        """
        self.logger.debug("Compiling convention file", path=str(path))
        return self.compile_tree(build_from_yaml(path, global_macros))

    def compile_sections(self, index_path: Union[str, Path]) -> list[Section]:
        """
        Compile every section listed in a section index file.

        Raises:
            MissingDocumentError: If the index or a section file does not exist
            MalformedDocumentError: If any file has an unrecognized shape
        """
        sections = load_sections(index_path)
        for section in sections:
            self.logger.debug("Compiling section", section=section.name)
            self.compile_tree(section.tree)

        self.logger.info(
            "Section index compiled",
            path=str(index_path),
            sections=len(sections),
        )
        return sections

    def get_node(
        self, tree: ConventionNode, sequence: Union[str, Iterable[SequenceItem]]
    ) -> Optional[ConventionNode]:
        """Exact-path lookup in a compiled tree."""
        return get_node(tree, sequence)

    def views(self, tree: ConventionNode) -> list[NodeView]:
        """Depth-first views of a compiled tree using the configured rendering."""
        return list(iter_views(tree, self.config.render))
