"""Resolve JSX contexts and splice handler stubs into components."""

from __future__ import annotations

from .compose import Composer, add_handler_prefix, compose_handler_fragment
from .insertion import (
    ClassTarget,
    ComponentShape,
    FunctionalTarget,
    HandlerInsertionRequest,
    InsertionTarget,
    class_insertion_anchor,
    functional_insertion_anchor,
    infer_indent,
    insert_handler,
    insert_into_class_component,
    insert_into_functional_component,
)
from .jsx_context import (
    JsxAttributeContext,
    match_attribute_context,
    patch_source_at,
    resolve_jsx_component,
)
from .params import FunctionParam, extract_params
from .search import (
    Direction,
    NodePredicate,
    find_ancestor_when,
    find_parents_when,
    is_class_extends_runtime_component,
    is_functional_component,
    names_runtime_base_class,
)
from .service import HandlerInsertion, HandlerService

__all__ = [
    "ClassTarget",
    "ComponentShape",
    "Composer",
    "Direction",
    "FunctionParam",
    "FunctionalTarget",
    "HandlerInsertion",
    "HandlerInsertionRequest",
    "HandlerService",
    "InsertionTarget",
    "JsxAttributeContext",
    "NodePredicate",
    "add_handler_prefix",
    "class_insertion_anchor",
    "compose_handler_fragment",
    "extract_params",
    "find_ancestor_when",
    "find_parents_when",
    "functional_insertion_anchor",
    "infer_indent",
    "insert_handler",
    "insert_into_class_component",
    "insert_into_functional_component",
    "is_class_extends_runtime_component",
    "is_functional_component",
    "match_attribute_context",
    "names_runtime_base_class",
    "patch_source_at",
    "resolve_jsx_component",
]
