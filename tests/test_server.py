"""Tests for the language server handlers."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import FakeLanguageServer, FakeSpellchecker
from lsprotocol.types import (
    ClientCapabilities,
    CodeActionContext,
    CodeActionParams,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    GeneralClientCapabilities,
    HoverParams,
    InitializeParams,
    InitializedParams,
    MarkupKind,
    MessageType,
    Position,
    PositionEncodingKind,
    Range,
    TextDocumentContentChangeWholeDocument,
    TextDocumentIdentifier,
    TextDocumentItem,
    VersionedTextDocumentIdentifier,
)

from spellsp import server
from spellsp.server import DocumentBuffer

URI = "file:///tmp/notes.txt"


def _open_params(text: str) -> DidOpenTextDocumentParams:
    return DidOpenTextDocumentParams(
        text_document=TextDocumentItem(uri=URI, language_id="plaintext", version=1, text=text)
    )


def _change_params(*texts: str) -> DidChangeTextDocumentParams:
    return DidChangeTextDocumentParams(
        text_document=VersionedTextDocumentIdentifier(uri=URI, version=2),
        content_changes=[TextDocumentContentChangeWholeDocument(text=t) for t in texts],
    )


def _hover_params(line: int, character: int) -> HoverParams:
    return HoverParams(
        text_document=TextDocumentIdentifier(uri=URI),
        position=Position(line=line, character=character),
    )


class TestDocumentBuffer:
    """Tests for DocumentBuffer."""

    @pytest.mark.asyncio
    async def test_replace_and_snapshot(self):
        """Should replace the text wholesale."""
        buffer = DocumentBuffer()
        assert await buffer.snapshot() == ""

        await buffer.replace("first")
        await buffer.replace("second")
        assert await buffer.snapshot() == "second"

    @pytest.mark.asyncio
    async def test_last_write_wins(self):
        """Concurrent writes should leave the last completed one."""
        buffer = DocumentBuffer("start")
        await asyncio.gather(buffer.replace("a"), buffer.replace("b"))
        assert await buffer.snapshot() == "b"


class TestInitialized:
    """Tests for the initialized notification."""

    def test_logs_to_client(self, fake_server):
        """Should send a log message to the client."""
        server.initialized(fake_server, InitializedParams())

        assert len(fake_server.log_messages) == 1
        assert fake_server.log_messages[0].type == MessageType.Info
        assert fake_server.log_messages[0].message == "server initialized!"


class TestDocumentSync:
    """Tests for didOpen / didChange."""

    @pytest.mark.asyncio
    async def test_did_open_publishes_diagnostics(self, fake_server):
        """Opening a document should store it and push diagnostics."""
        await server.did_open(fake_server, _open_params("Helo world"))

        assert await fake_server.buffer.snapshot() == "Helo world"
        assert len(fake_server.published) == 1
        published = fake_server.published[0]
        assert published.uri == URI
        assert len(published.diagnostics) == 1
        assert published.diagnostics[0].range == Range(
            start=Position(line=0, character=0), end=Position(line=0, character=4)
        )

    @pytest.mark.asyncio
    async def test_did_change_replaces_buffer(self, fake_server, fake_spellchecker):
        """A change should replace the whole buffer and push diagnostics again."""
        await server.did_open(fake_server, _open_params("Helo"))
        await server.did_change(fake_server, _change_params("Helo there"))

        assert await fake_server.buffer.snapshot() == "Helo there"
        assert len(fake_server.published) == 2
        assert fake_spellchecker.checked == ["Helo", "Helo there"]

    @pytest.mark.asyncio
    async def test_did_change_uses_first_change(self, fake_server):
        """Only the first content change should be applied."""
        await server.did_change(fake_server, _change_params("first", "second"))
        assert await fake_server.buffer.snapshot() == "first"

    @pytest.mark.asyncio
    async def test_did_change_without_changes_republishes(self, fake_server):
        """An empty change list should keep the buffer and still publish."""
        await server.did_open(fake_server, _open_params("Helo"))
        await server.did_change(fake_server, _change_params())

        assert await fake_server.buffer.snapshot() == "Helo"
        assert len(fake_server.published) == 2

    @pytest.mark.asyncio
    async def test_no_spellchecker_skips_diagnostics(self):
        """Without a loaded dictionary nothing should be published."""
        ls = FakeLanguageServer(spellchecker=None)
        await server.did_open(ls, _open_params("Helo"))

        assert await ls.buffer.snapshot() == "Helo"
        assert ls.published == []


class TestHover:
    """Tests for hover."""

    @pytest.mark.asyncio
    async def test_hover_returns_markdown(self, fake_server):
        """Should return the rendered definition of the hovered word."""
        fake_server.definitions = MagicMock()
        fake_server.definitions.define = AsyncMock(return_value="# world (/wɜːld/)\n")
        await server.did_open(fake_server, _open_params("Helo world"))

        result = await server.hover(fake_server, _hover_params(0, 7))

        fake_server.definitions.define.assert_awaited_once_with("world")
        assert result is not None
        assert result.contents.kind == MarkupKind.Markdown
        assert result.contents.value == "# world (/wɜːld/)\n"

    @pytest.mark.asyncio
    async def test_hover_outside_word(self, fake_server):
        """Should return None without looking anything up."""
        fake_server.definitions = MagicMock()
        fake_server.definitions.define = AsyncMock()
        await server.did_open(fake_server, _open_params("Helo world"))

        assert await server.hover(fake_server, _hover_params(0, 4)) is None
        assert await server.hover(fake_server, _hover_params(5, 0)) is None
        fake_server.definitions.define.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_hover_lookup_failure(self, fake_server):
        """Should return None when the lookup yields nothing."""
        fake_server.definitions = MagicMock()
        fake_server.definitions.define = AsyncMock(return_value=None)
        await server.did_open(fake_server, _open_params("xyzzy"))

        assert await server.hover(fake_server, _hover_params(0, 1)) is None


class TestCodeAction:
    """Tests for quick-fix code actions."""

    @pytest.mark.asyncio
    async def test_offers_suggestions(self, fake_server):
        """Should offer replacements for the flagged word."""
        await server.did_open(fake_server, _open_params("Helo world"))
        diagnostics = fake_server.published[0].diagnostics
        params = CodeActionParams(
            text_document=TextDocumentIdentifier(uri=URI),
            range=diagnostics[0].range,
            context=CodeActionContext(diagnostics=diagnostics),
        )

        actions = await server.code_action(fake_server, params)

        assert [a.title for a in actions] == ["Replace with 'Hello'", "Replace with 'Help'"]

    @pytest.mark.asyncio
    async def test_no_spellchecker(self):
        """Should offer nothing without a dictionary."""
        ls = FakeLanguageServer(spellchecker=None)
        params = CodeActionParams(
            text_document=TextDocumentIdentifier(uri=URI),
            range=Range(start=Position(line=0, character=0), end=Position(line=0, character=0)),
            context=CodeActionContext(diagnostics=[]),
        )
        assert await server.code_action(ls, params) == []


class TestStart:
    """Tests for start."""

    def test_attaches_spellchecker_and_runs(self, monkeypatch):
        """Should attach the capability before serving."""
        monkeypatch.setattr(server.server, "spellchecker", None)
        monkeypatch.setattr(server.server, "definitions", server.server.definitions)
        spellchecker = FakeSpellchecker()
        definitions = MagicMock()
        calls = []

        server.start(spellchecker, definitions, start_fn=lambda: calls.append(True))

        assert calls == [True]
        assert server.server.spellchecker is spellchecker
        assert server.server.definitions is definitions


class TestInitialize:
    """Tests for position encoding negotiation."""

    @staticmethod
    def _initialize(capabilities: ClientCapabilities):
        ls = server.SpellServer("spellsp-test", "0", protocol_cls=server.SpellProtocol)
        steps = ls.protocol.lsp_initialize(InitializeParams(capabilities=capabilities))
        with pytest.raises(StopIteration) as exc_info:
            next(steps)
        return ls, exc_info.value.value

    def test_utf8_without_client_preference(self):
        """Should advertise UTF-8 when the client states no encodings."""
        _, result = self._initialize(ClientCapabilities())
        assert result.capabilities.position_encoding == PositionEncodingKind.Utf8

    def test_utf8_over_preferred_utf16(self):
        """Should advertise UTF-8 even when the client lists UTF-16 first."""
        capabilities = ClientCapabilities(
            general=GeneralClientCapabilities(
                position_encodings=[PositionEncodingKind.Utf16, PositionEncodingKind.Utf8]
            )
        )
        ls, result = self._initialize(capabilities)
        assert result.capabilities.position_encoding == PositionEncodingKind.Utf8
        assert ls.workspace.position_encoding == PositionEncodingKind.Utf8

    def test_module_server_uses_spell_protocol(self):
        """Should wire the encoding-fixing protocol into the shared server."""
        assert isinstance(server.server.protocol, server.SpellProtocol)
