"""Tests for :mod:`jsxhandler.handlers.insertion`."""

from __future__ import annotations

import asyncio
from textwrap import dedent

from jsxhandler.editor import BufferEditor, Position, TextDocument
from jsxhandler.handlers import (
    ClassTarget,
    FunctionParam,
    FunctionalTarget,
    HandlerInsertionRequest,
    class_insertion_anchor,
    functional_insertion_anchor,
    infer_indent,
    insert_handler,
    insert_into_class_component,
    insert_into_functional_component,
)
from jsxhandler.syntax import SyntaxKind, SyntaxNode

CLASS_SOURCE = dedent(
    """\
    class App extends React.Component {
      a() {}
      b() {
        return <div/>;
      }
    }
    """
)

FUNCTIONAL_SOURCE = "const Comp = () => { const y = 1; return <div/> }"


def _class_node(provider, text: str) -> SyntaxNode:
    root = provider.parse("mem://app.tsx", text)
    return next(
        node for node in root.children if node.kind is SyntaxKind.CLASS_DECLARATION
    )


def test_class_anchor_is_member_around_offset(provider) -> None:
    class_node = _class_node(provider, CLASS_SOURCE)
    first, second = class_node.members

    assert class_insertion_anchor(class_node, CLASS_SOURCE.index("<div/>")) is second
    assert class_insertion_anchor(class_node, CLASS_SOURCE.index("a()")) is first
    # The boundary between ``a`` and ``b`` belongs to ``b``.
    assert class_insertion_anchor(class_node, second.pos) is second
    assert class_insertion_anchor(class_node, 0) is None


def test_insert_into_class_component_before_member(provider) -> None:
    document = TextDocument("mem://app.tsx", CLASS_SOURCE)
    class_node = _class_node(provider, CLASS_SOURCE)
    member_b = class_node.members[1]

    inserted_at = asyncio.run(
        insert_into_class_component(
            editor=BufferEditor(document),
            document=document,
            class_node=class_node,
            symbol_position=document.position_at(CLASS_SOURCE.index("<div/>")),
            full_handler_name="handleClick",
            handler_params=[FunctionParam("", "event")],
            indent=2,
        )
    )

    assert inserted_at == TextDocument("mem://app.tsx", CLASS_SOURCE).position_at(
        member_b.pos
    )
    text = document.text
    assert text.index("a() {}") < text.index("handleClick") < text.index("b() {")
    assert "  a() {}\n  handleClick = (event) => {\n  };\n\n  b() {" in text


def test_functional_anchor_skips_component_and_prefers_return(provider) -> None:
    root = provider.parse("mem://comp.tsx", FUNCTIONAL_SOURCE)
    component = root.children[0]

    anchor = functional_insertion_anchor(
        root, FUNCTIONAL_SOURCE.index("<div/>") + 1, component
    )

    assert anchor is not None
    assert anchor.kind is SyntaxKind.RETURN_STATEMENT
    assert anchor.pos == FUNCTIONAL_SOURCE.index(" return")


def test_functional_anchor_requires_component_on_chain(provider) -> None:
    source = FUNCTIONAL_SOURCE + "\nconst Other = () => { return null; };"
    root = provider.parse("mem://comp.tsx", source)
    other = root.children[1]

    assert functional_insertion_anchor(root, source.index("<div/>"), other) is None


def test_insert_into_functional_component_before_return(provider) -> None:
    document = TextDocument("mem://comp.tsx", FUNCTIONAL_SOURCE)
    component = provider.parse(document.uri, document.text).children[0]

    inserted_at = asyncio.run(
        insert_into_functional_component(
            editor=BufferEditor(document),
            document=document,
            functional_node=component,
            symbol_position=document.position_at(FUNCTIONAL_SOURCE.index("<div/>")),
            full_handler_name="handleClick",
            provider=provider,
        )
    )

    assert inserted_at == Position(0, FUNCTIONAL_SOURCE.index(" return"))
    assert document.text == (
        "const Comp = () => { const y = 1;"
        "\n  const handleClick = () => {\n  };\n"
        " return <div/> }"
    )


def test_insert_handler_dispatches_on_target(provider) -> None:
    source = dedent(
        """\
        function Page() {
            const [open, setOpen] = useState(false);
            return <Modal open={open} />;
        }
        """
    )
    document = TextDocument("mem://page.tsx", source)
    root = provider.parse(document.uri, source)
    request = HandlerInsertionRequest(
        target=FunctionalTarget(root.children[0]),
        symbol_position=document.position_at(source.index("open={")),
        full_handler_name="handleOk",
    )

    inserted_at = asyncio.run(
        insert_handler(
            request,
            editor=BufferEditor(document),
            document=document,
            provider=provider,
        )
    )

    assert inserted_at is not None
    assert "\n    const handleOk = () => {\n    };\n\n    return <Modal" in document.text
    assert ClassTarget(root.children[0]).shape.value == "class"


def test_infer_indent(make_node) -> None:
    source = "  foo();\n\tbar();\nx; baz();"

    def at(word: str) -> SyntaxNode:
        start = source.index(word)
        return make_node(word, start, start + 5, source=source)

    assert infer_indent(source, at("foo"), 4) == 2
    assert infer_indent(source, at("bar"), 4) == 4
    assert infer_indent(source, at("baz"), 3) == 3
