"""High-level flow: cursor to component to inserted handler stub."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from jsxhandler.core.config import AppConfig, ParserLanguage
from jsxhandler.core.logging import Logger, get_logger
from jsxhandler.editor import DocumentEditor, Position, TextDocument
from jsxhandler.library import (
    ComponentNameResolver,
    LibraryModuleMatcher,
    ModuleMatcher,
)
from jsxhandler.navigation import NavigationService, get_container_symbol_at_position
from jsxhandler.syntax import (
    SyntaxNode,
    TreeProvider,
    TreeSitterProvider,
    resolve_path_at,
)

from .compose import Composer, add_handler_prefix, compose_handler_fragment
from .insertion import (
    ClassTarget,
    ComponentShape,
    FunctionalTarget,
    HandlerInsertionRequest,
    InsertionTarget,
    insert_handler,
)
from .jsx_context import resolve_jsx_component
from .params import FunctionParam, extract_params
from .search import (
    Direction,
    find_ancestor_when,
    is_class_extends_runtime_component,
    is_functional_component,
    names_runtime_base_class,
)

__all__ = ["HandlerInsertion", "HandlerService"]


@dataclass(frozen=True, slots=True)
class HandlerInsertion:
    """Outcome of a successful :meth:`HandlerService.insert_handler`."""

    target: InsertionTarget
    position: Position
    handler_name: str
    params: tuple[FunctionParam, ...]


async def _functional_predicate(node: SyntaxNode) -> bool:
    return is_functional_component(node)


async def _syntactic_class_predicate(node: SyntaxNode) -> bool:
    return names_runtime_base_class(node)


class HandlerService:
    """Bind the collaborators needed to resolve and insert handlers.

    Without a navigation service, components cannot be resolved and class
    components are recognised from their ``extends`` clause text alone.
    """

    def __init__(
        self,
        *,
        config: AppConfig,
        provider: TreeProvider,
        matcher: ModuleMatcher,
        resolver: ComponentNameResolver,
        navigation: NavigationService | None = None,
        declaration_provider: TreeProvider | None = None,
        composer: Composer = compose_handler_fragment,
        logger: Logger | None = None,
    ) -> None:
        self.config = config
        self.provider = provider
        self.matcher = matcher
        self.resolver = resolver
        self.navigation = navigation
        self.declaration_provider = declaration_provider
        self.composer = composer
        self._logger = logger or get_logger(__name__)

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        *,
        navigation: NavigationService | None = None,
    ) -> "HandlerService":
        return cls(
            config=config,
            provider=TreeSitterProvider(language=config.parser.language),
            matcher=LibraryModuleMatcher(config.library),
            resolver=ComponentNameResolver(config.library.component_aliases),
            navigation=navigation,
            declaration_provider=TreeSitterProvider(
                language=ParserLanguage.TYPESCRIPT
            ),
        )

    async def resolve_component(
        self,
        document: TextDocument,
        position: Position,
    ) -> str | None:
        if self.navigation is None:
            return None
        return await resolve_jsx_component(
            document,
            position,
            provider=self.provider,
            navigation=self.navigation,
            matcher=self.matcher,
            resolver=self.resolver,
            placeholder=self.config.insertion.placeholder,
            logger=self._logger,
        )

    async def signature_container(
        self,
        document: TextDocument,
        position: Position,
    ) -> str | None:
        """Name the declaration (e.g. ``ButtonProps``) typing ``position``.

        Editor integrations read the attribute's property signature from
        this declaration before passing it to :meth:`insert_handler`.
        """

        if self.navigation is None:
            return None
        return await get_container_symbol_at_position(
            self.navigation, document.uri, position
        )

    async def find_target(
        self,
        document: TextDocument,
        position: Position,
        *,
        shape: ComponentShape | None = None,
    ) -> InsertionTarget | None:
        """Nearest class component, else the outermost functional one."""

        root = self.provider.parse(document.uri, document.text)
        chain = resolve_path_at(root, document.offset_at(position))

        if shape in (None, ComponentShape.CLASS):
            if self.navigation is not None:
                class_predicate = partial(
                    is_class_extends_runtime_component,
                    document=document,
                    navigation=self.navigation,
                    matcher=self.matcher,
                )
            else:
                class_predicate = _syntactic_class_predicate
            class_node = await find_ancestor_when(
                chain, class_predicate, Direction.OUTWARD
            )
            if class_node is not None:
                return ClassTarget(class_node)

        if shape in (None, ComponentShape.FUNCTIONAL):
            functional_node = await find_ancestor_when(
                chain, _functional_predicate, Direction.INWARD
            )
            if functional_node is not None:
                return FunctionalTarget(functional_node)

        self._logger.debug(
            "component-target-missing",
            uri=document.uri,
            shape=str(shape) if shape else "auto",
        )
        return None

    async def insert_handler(
        self,
        document: TextDocument,
        position: Position,
        attribute: str,
        *,
        editor: DocumentEditor,
        signature: str | None = None,
        shape: ComponentShape | None = None,
        indent: int | None = None,
    ) -> HandlerInsertion | None:
        """Insert a stub handling ``attribute`` for the component at ``position``."""

        target = await self.find_target(document, position, shape=shape)
        if target is None:
            return None

        params: tuple[FunctionParam, ...] = ()
        if signature:
            params = tuple(
                extract_params(signature, provider=self.declaration_provider)
            )
        settings = self.config.insertion
        handler_name = add_handler_prefix(
            attribute,
            handler_prefix=settings.handler_prefix,
            event_prefix=settings.event_prefix,
        )
        request = HandlerInsertionRequest(
            target=target,
            symbol_position=position,
            full_handler_name=handler_name,
            params=params,
            indent=indent,
        )
        inserted_at = await insert_handler(
            request,
            editor=editor,
            document=document,
            provider=self.provider,
            composer=self.composer,
            default_indent=settings.default_indent,
        )
        if inserted_at is None:
            return None

        self._logger.info(
            "handler-inserted",
            uri=document.uri,
            handler=handler_name,
            shape=target.shape.value,
            line=inserted_at.line,
            character=inserted_at.character,
        )
        return HandlerInsertion(
            target=target,
            position=inserted_at,
            handler_name=handler_name,
            params=params,
        )
