"""Extract handler parameter names from property signature declarations."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

from jsxhandler.core.config import ParserLanguage
from jsxhandler.core.logging import get_logger
from jsxhandler.syntax import (
    SyntaxKind,
    SyntaxNode,
    TreeProvider,
    TreeSitterProvider,
    traverse_with_parents,
)

__all__ = ["FunctionParam", "extract_params"]

_WRAPPER_TEMPLATE = "type DUMMY = {{\n  {fragment}\n}}"


@dataclass(frozen=True, slots=True)
class FunctionParam:
    """A handler parameter; ``type`` is not populated yet and stays empty."""

    type: str
    text: str


@lru_cache(maxsize=1)
def _declaration_provider() -> TreeProvider:
    return TreeSitterProvider(language=ParserLanguage.TYPESCRIPT)


def extract_params(
    fragment: str,
    *,
    provider: TreeProvider | None = None,
) -> list[FunctionParam]:
    """Return the parameters of a function-typed property signature.

    ``fragment`` is a single property declaration such as
    ``onChange?: (value: number) => void;``. Direct function types and
    unions with a parenthesized function member are understood; any other
    type yields an empty list.
    """

    wrapped = _WRAPPER_TEMPLATE.format(fragment=fragment)
    root = (provider or _declaration_provider()).parse("", wrapped)

    signature: SyntaxNode | None = None

    def visit(node: SyntaxNode, ancestors: Sequence[SyntaxNode]) -> bool:
        nonlocal signature
        if signature is not None:
            return False
        if node.kind is SyntaxKind.PROPERTY_SIGNATURE:
            signature = node
            return False
        return True

    traverse_with_parents(root, visit)
    if signature is None:
        return []
    return [FunctionParam(type="", text=name) for name in _signature_params(signature)]


def _signature_params(signature: SyntaxNode) -> list[str]:
    declared = signature.signature_type
    if declared is None:
        return []

    # e.g. onChange?: (checked: boolean) => void;
    if declared.kind is SyntaxKind.FUNCTION_TYPE:
        return _function_type_params(declared)

    # e.g. tipFormatter?: null | ((value: number) => React.ReactNode);
    if declared.kind is SyntaxKind.UNION_TYPE:
        function_members = [
            (member, member.inner_type)
            for member in declared.union_members
            if member.kind is SyntaxKind.PARENTHESIZED_TYPE
            and member.inner_type is not None
            and member.inner_type.kind is SyntaxKind.FUNCTION_TYPE
        ]
        if not function_members:
            return []
        chosen, inner = function_members[0]
        if len(function_members) > 1:
            get_logger(__name__).warning(
                "union-multiple-function-types",
                signature=signature.text,
                used=chosen.text,
            )
        return _function_type_params(inner)

    return []


def _function_type_params(function_type: SyntaxNode) -> list[str]:
    names: list[str] = []
    for parameter in function_type.parameters:
        name = parameter.parameter_name
        if name is not None:
            names.append(name.text)
    return names
