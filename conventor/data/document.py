"""
Generic document ingestion for convention trees.

The document is a nested structure of mappings, sequences and scalars.
Each mapping entry is dispatched on its key and value shape:

    define: {pattern: replacement}      macros on the current node
    conventions: {...} / "-": {...}     nested scope, no implied pass
    "/": {...}                          nested scope, implied pass
    steps: [...]                        relay steps after an opponent pass
    -steps: [...]                       relay steps directly after the node
    description: text                   description of the current node
    <sequence key>: text                description of the node at the key
    <sequence key>: {...}               nested node at the key

Sequence keys may list several comma-separated sequences; "-" separates
calls and "/" inserts a pass. Inside a nested node mapping every child
sequence implies an intervening pass.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, Iterable, Optional

import structlog

from conventor.conventions.macros import Macro
from conventor.conventions.tree import ConventionNode
from conventor.errors import MalformedDocumentError
from conventor.notation.parser import split_sequence

logger = structlog.get_logger(__name__)

DEFINE_KEY = "define"
SCOPE_KEYS = ("conventions", "-")
IMPLIED_PASS_SCOPE_KEY = "/"
STEPS_KEY = "steps"
DIRECT_STEPS_KEY = "-steps"
DESCRIPTION_KEY = "description"

SCALAR_TYPES = (str, int, float)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)


def _scalar_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def macros_from_mapping(mapping: Any, path: str = DEFINE_KEY) -> list[Macro]:
    """
    Convert a define: mapping into macros.

    Raises:
        MalformedDocumentError: If the mapping, a rule, or a pattern is invalid
    """
    if mapping is None:
        return []

    if not isinstance(mapping, Mapping):
        raise MalformedDocumentError(
            "Macro definitions must be a mapping",
            path=path,
            key=DEFINE_KEY,
            expected_shape="mapping",
        )

    macros = []
    for pattern, replacement in mapping.items():
        if pattern is None or replacement is None:
            continue

        if not (_is_scalar(pattern) and _is_scalar(replacement)):
            raise MalformedDocumentError(
                f"Macro {pattern!r} must map a scalar to a scalar",
                path=path,
                key=str(pattern),
                expected_shape="scalar",
            )

        pattern = _scalar_text(pattern)
        try:
            re.compile(pattern)
        except re.error as e:
            raise MalformedDocumentError(
                f"Invalid macro pattern {pattern!r}: {e}",
                path=path,
                key=pattern,
                expected_shape="regular expression",
            ) from e

        macros.append(Macro(pattern, _scalar_text(replacement)))

    return macros


class DocumentBuilder:
    """
    Builds a raw convention tree from a generic document.

    Priorities come from a declaration counter, so anything declared later in
    the document outranks what came before it.
    """

    def __init__(self):
        self.declarations = 0
        self.logger = logger

    def next_priority(self) -> int:
        self.declarations += 1
        return self.declarations

    def build(self, document: Any, global_macros: Iterable[Macro] = ()) -> ConventionNode:
        """
        Build the tree for document.

        Args:
            document: Root mapping of the convention document
            global_macros: Macros installed on the root before the document's own

        Returns:
            Root ConventionNode, not yet expanded

        Raises:
            MalformedDocumentError: If any node has an unrecognized shape
        """
        if not isinstance(document, Mapping):
            raise MalformedDocumentError(
                "Convention document root must be a mapping",
                path="",
                expected_shape="mapping",
                context={"type": type(document).__name__},
            )

        root = ConventionNode.root(global_macros)
        self._process_mapping(document, root, implied_pass=False, path="")

        self.logger.debug(
            "Convention document ingested",
            declarations=self.declarations,
            top_level_calls=len(root.children),
        )
        return root

    def _process_mapping(
        self, mapping: Mapping, parent: ConventionNode, implied_pass: bool, path: str
    ) -> None:
        for key, value in mapping.items():
            entry_path = f"{path}/{key}"

            if key == DEFINE_KEY:
                parent.macros.extend(macros_from_mapping(value, entry_path))
            elif key in SCOPE_KEYS:
                self._process_scope(value, parent, False, entry_path, key)
            elif key == IMPLIED_PASS_SCOPE_KEY:
                self._process_scope(value, parent, True, entry_path, key)
            elif key == STEPS_KEY:
                self._process_steps(value, parent, True, entry_path)
            elif key == DIRECT_STEPS_KEY:
                self._process_steps(value, parent, False, entry_path)
            elif key == DESCRIPTION_KEY:
                self._process_description(value, parent, entry_path)
            else:
                sequences = self._sequence_keys(key, entry_path)
                self._process_conventions(sequences, value, parent, implied_pass, entry_path)

    def _process_scope(
        self, value: Any, parent: ConventionNode, implied_pass: bool, path: str, key: str
    ) -> None:
        if not isinstance(value, Mapping):
            raise MalformedDocumentError(
                f"Scope {key!r} must be a mapping",
                path=path,
                key=key,
                expected_shape="mapping",
            )
        self._process_mapping(value, parent, implied_pass, path)

    def _process_description(self, value: Any, node: ConventionNode, path: str) -> None:
        if value is None:
            return
        if not _is_scalar(value):
            raise MalformedDocumentError(
                "Description must be a scalar",
                path=path,
                key=DESCRIPTION_KEY,
                expected_shape="scalar",
            )
        node.description = _scalar_text(value)
        node.priority = self.next_priority()

    def _process_steps(
        self, value: Any, parent: ConventionNode, implied_pass: bool, path: str
    ) -> None:
        if not _is_sequence(value):
            raise MalformedDocumentError(
                "Steps must be a sequence",
                path=path,
                key=STEPS_KEY if implied_pass else DIRECT_STEPS_KEY,
                expected_shape="sequence",
            )

        target = parent.get_or_create(["P"]) if implied_pass else parent
        for index, item in enumerate(value):
            template = ConventionNode()
            item_path = f"{path}[{index}]"

            if _is_scalar(item):
                self._process_description(item, template, item_path)
            elif isinstance(item, Mapping):
                self._process_mapping(item, template, implied_pass=True, path=item_path)
            else:
                raise MalformedDocumentError(
                    "Each step must be a scalar description or a mapping",
                    path=item_path,
                    expected_shape="scalar or mapping",
                )

            target.steps.append(template)

    def _sequence_keys(self, key: Any, path: str) -> list[str]:
        if isinstance(key, str):
            return [part for part in key.split(",") if part.strip()]
        if isinstance(key, (int, float)) and not isinstance(key, bool):
            return [str(key)]
        if isinstance(key, (tuple, list)) and all(isinstance(part, str) for part in key):
            return list(key)
        raise MalformedDocumentError(
            f"Unsupported sequence key {key!r}",
            path=path,
            key=str(key),
            expected_shape="string or sequence of strings",
        )

    def _process_conventions(
        self,
        sequences: list[str],
        value: Any,
        parent: ConventionNode,
        implied_pass: bool,
        path: str,
    ) -> None:
        if not (value is None or _is_scalar(value) or isinstance(value, Mapping)):
            raise MalformedDocumentError(
                "A bidding sequence must map to a description or a mapping",
                path=path,
                expected_shape="scalar or mapping",
            )

        for sequence in sequences:
            calls = split_sequence(sequence)
            if implied_pass:
                calls.insert(0, "P")

            child = parent.get_or_create(calls)
            child.priority = self.next_priority()

            if isinstance(value, Mapping):
                # Nested sequences imply a pass by default
                self._process_mapping(value, child, implied_pass=True, path=path)
            else:
                self._process_description(value, child, path)


def build_from_generic_document(
    document: Any, global_macros: Optional[Iterable[Macro]] = None
) -> ConventionNode:
    """Build an unexpanded convention tree from a generic document."""
    return DocumentBuilder().build(document, global_macros or ())
