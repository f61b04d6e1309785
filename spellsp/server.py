"""Language server surface: document sync, diagnostics, hover and quick fixes."""

import asyncio
import logging
from collections.abc import Callable

from lsprotocol import types
from pygls.lsp.server import LanguageServer
from pygls.protocol import LanguageServerProtocol, lsp_method

from spellsp import __version__
from spellsp.config import settings
from spellsp.services.definitions import DefinitionService
from spellsp.services.spellcheck import (
    SpellcheckCapability,
    generate_diagnostics,
    suggestion_actions,
)
from spellsp.services.tokenizer import word_at_position

logger = logging.getLogger(__name__)


class DocumentBuffer:
    """The text of the open document; every write replaces it wholesale."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._lock = asyncio.Lock()

    async def replace(self, text: str) -> None:
        async with self._lock:
            self._text = text

    async def snapshot(self) -> str:
        async with self._lock:
            return self._text


class SpellProtocol(LanguageServerProtocol):
    """Protocol that always negotiates UTF-8 positions.

    Every column the server sends or reads is a UTF-8 byte offset, so the
    encoding is fixed before pygls picks one from the client's preferences.
    """

    @lsp_method(types.INITIALIZE)
    def lsp_initialize(self, params: types.InitializeParams):
        general = params.capabilities.general or types.GeneralClientCapabilities()
        general.position_encodings = [types.PositionEncodingKind.Utf8]
        params.capabilities.general = general
        return (yield from super().lsp_initialize(params))


class SpellServer(LanguageServer):
    """Language server owning the session state: buffer, spellchecker, definitions."""

    def __init__(
        self,
        *args,
        definitions: DefinitionService | None = None,
        max_suggestions: int | None = None,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.buffer = DocumentBuffer()
        self.definitions = definitions or DefinitionService()
        self.spellchecker: SpellcheckCapability | None = None
        self.max_suggestions = max_suggestions or settings.max_suggestions


server = SpellServer(
    "spellsp",
    __version__,
    text_document_sync_kind=types.TextDocumentSyncKind.Full,
    protocol_cls=SpellProtocol,
)


def _publish_diagnostics(ls: SpellServer, uri: str, text: str) -> None:
    if ls.spellchecker is None:
        logger.warning("No dictionary loaded, skipping diagnostics")
        return
    diagnostics = generate_diagnostics(text, ls.spellchecker)
    logger.debug(f"Publishing {len(diagnostics)} diagnostics for {uri}")
    ls.text_document_publish_diagnostics(
        types.PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(types.INITIALIZED)
def initialized(ls: SpellServer, params: types.InitializedParams) -> None:
    ls.window_log_message(
        types.LogMessageParams(type=types.MessageType.Info, message="server initialized!")
    )


@server.feature(types.TEXT_DOCUMENT_DID_OPEN)
async def did_open(ls: SpellServer, params: types.DidOpenTextDocumentParams) -> None:
    await ls.buffer.replace(params.text_document.text)
    text = await ls.buffer.snapshot()
    _publish_diagnostics(ls, params.text_document.uri, text)


@server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
async def did_change(ls: SpellServer, params: types.DidChangeTextDocumentParams) -> None:
    # Full sync: the first change carries the whole document
    if params.content_changes:
        await ls.buffer.replace(params.content_changes[0].text)
    text = await ls.buffer.snapshot()
    _publish_diagnostics(ls, params.text_document.uri, text)


@server.feature(types.TEXT_DOCUMENT_HOVER)
async def hover(ls: SpellServer, params: types.HoverParams) -> types.Hover | None:
    text = await ls.buffer.snapshot()
    word = word_at_position(text, params.position)
    if word is None:
        return None
    rendered = await ls.definitions.define(word)
    if not rendered:
        return None
    return types.Hover(
        contents=types.MarkupContent(kind=types.MarkupKind.Markdown, value=rendered)
    )


@server.feature(
    types.TEXT_DOCUMENT_CODE_ACTION,
    types.CodeActionOptions(code_action_kinds=[types.CodeActionKind.QuickFix]),
)
async def code_action(ls: SpellServer, params: types.CodeActionParams) -> list[types.CodeAction]:
    if ls.spellchecker is None:
        return []
    text = await ls.buffer.snapshot()
    return suggestion_actions(
        text,
        params.text_document.uri,
        params.context.diagnostics,
        ls.spellchecker,
        ls.max_suggestions,
    )


def start(
    spellchecker: SpellcheckCapability,
    definitions: DefinitionService | None = None,
    start_fn: Callable[[], None] | None = None,
) -> None:
    """Attach the loaded spellchecker and serve over stdio."""
    server.spellchecker = spellchecker
    if definitions is not None:
        server.definitions = definitions
    (start_fn or server.start_io)()
