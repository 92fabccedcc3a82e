"""Tests for README extraction and generation."""

from unittest.mock import MagicMock

import httpx
import pytest

from readme_generator.generators.llm_client import (
    NO_README,
    ChatClient,
    ChatCompletionsClient,
)
from readme_generator.generators.prompt import README_SECTIONS, PromptRequest
from readme_generator.generators.readme_gen import (
    MARKER_MISSING_MESSAGE,
    ExtractionError,
    ExtractionResult,
    ReadmeGenerator,
    extract,
)
from readme_generator.scanner.structure import ModuleRecord
from readme_generator.utils.config import ProviderConfig

_README = "CONTENTS OF THIS FILE\n\n" + "\n".join(
    f"- {s}" for s in README_SECTIONS
) + "\n\n" + "\n\n".join(f"## {s}\nText." for s in README_SECTIONS)


def _mock_client(reply: object = _README) -> MagicMock:
    """Create a mocked chat client."""
    client = MagicMock(spec=ChatClient)
    client.complete.return_value = reply
    return client


@pytest.fixture
def record() -> ModuleRecord:
    return ModuleRecord(name="Foo", description="Does X")


class TestExtract:
    """Tests for extract."""

    def test_preamble_removed(self) -> None:
        raw = "blah blah CONTENTS OF THIS FILE\n\n## Introduction\n..."
        assert extract(raw) == "CONTENTS OF THIS FILE\n\n## Introduction\n..."

    def test_case_insensitive(self) -> None:
        raw = "Here is your README:\n\ncontents of this file\n- Introduction\n"
        assert extract(raw) == "contents of this file\n- Introduction"

    def test_first_occurrence_used(self) -> None:
        raw = "x CONTENTS OF THIS FILE a\nCONTENTS OF THIS FILE b"
        assert extract(raw) == "CONTENTS OF THIS FILE a\nCONTENTS OF THIS FILE b"

    def test_trailing_whitespace_trimmed(self) -> None:
        assert extract("CONTENTS OF THIS FILE\n\n   \n") == "CONTENTS OF THIS FILE"

    def test_marker_missing(self) -> None:
        assert extract("I cannot help with that.") == MARKER_MISSING_MESSAGE
        assert MARKER_MISSING_MESSAGE == (
            'Error: "CONTENTS OF THIS FILE" not found in AI response.'
        )

    def test_empty_reply(self) -> None:
        assert extract("") == MARKER_MISSING_MESSAGE

    def test_marker_split_across_lines(self) -> None:
        assert extract("CONTENTS OF\nTHIS FILE") == MARKER_MISSING_MESSAGE


class TestExtractionResult:
    """Tests for ExtractionResult."""

    def test_ok(self) -> None:
        assert ExtractionResult(content="x").ok is True
        assert ExtractionResult(content="x", error=ExtractionError.TRANSPORT).ok is False


class TestReadmeGenerator:
    """Tests for ReadmeGenerator.generate."""

    def test_round_trip_keeps_sections(self, record: ModuleRecord) -> None:
        generator = ReadmeGenerator(_mock_client("Sure!\n\n" + _README), model="gpt-4")
        result = generator.generate(record)
        assert result.ok
        assert result.content.startswith("CONTENTS OF THIS FILE")
        positions = [result.content.index(f"## {s}") for s in README_SECTIONS]
        assert positions == sorted(positions)

    def test_request_passed_to_client(self, record: ModuleRecord) -> None:
        client = _mock_client()
        ReadmeGenerator(client, model="gpt-4").generate(record)
        client.complete.assert_called_once()
        request = client.complete.call_args[0][0]
        assert isinstance(request, PromptRequest)
        assert request.model == "gpt-4"
        assert '"name": "Foo"' in request.prompt

    def test_marker_missing(self, record: ModuleRecord) -> None:
        generator = ReadmeGenerator(_mock_client("I cannot help with that."), model="m")
        result = generator.generate(record)
        assert result.error is ExtractionError.MARKER_MISSING
        assert result.content == MARKER_MISSING_MESSAGE

    def test_no_readme_generated(self, record: ModuleRecord) -> None:
        result = ReadmeGenerator(_mock_client(NO_README), model="m").generate(record)
        assert result.content == MARKER_MISSING_MESSAGE

    def test_transport_error_becomes_message(self, record: ModuleRecord) -> None:
        client = _mock_client()
        client.complete.side_effect = httpx.ConnectError("connection refused")
        result = ReadmeGenerator(client, model="m").generate(record)
        assert result.error is ExtractionError.TRANSPORT
        assert result.content == "Error: connection refused"

    def test_any_client_failure_is_caught(self, record: ModuleRecord) -> None:
        client = _mock_client()
        client.complete.side_effect = ValueError("Expecting value: line 1 column 1")
        result = ReadmeGenerator(client, model="m").generate(record)
        assert result.content == "Error: Expecting value: line 1 column 1"

    def test_build_request(self, record: ModuleRecord) -> None:
        request = ReadmeGenerator(_mock_client(), model="m").build_request(record)
        assert request.max_tokens == 500


class TestMalformedReplies:
    """Tests for replies whose content is not plain text."""

    def _config(self) -> ProviderConfig:
        return ProviderConfig(
            provider="openai",
            base_uri="https://api.openai.com/v1/",
            chat_endpoint="chat/completions",
            api_key="k",
            model="gpt-4",
        )

    def _generator(self, content: object) -> ReadmeGenerator:
        body = {"choices": [{"message": {"content": content}}]}
        http_client = httpx.Client(
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json=body))
        )
        client = ChatCompletionsClient(self._config(), http_client=http_client)
        return ReadmeGenerator(client, model="gpt-4")

    def test_content_parts(self, record: ModuleRecord) -> None:
        parts = [{"type": "text", "text": "Sure. CONTENTS OF THIS FILE\n- Introduction"}]
        result = self._generator(parts).generate(record)
        assert result.ok
        assert result.content == "CONTENTS OF THIS FILE\n- Introduction"

    @pytest.mark.parametrize("content", [42, {"text": "x"}, [{"type": "image_url"}]])
    def test_non_text_content(self, record: ModuleRecord, content: object) -> None:
        result = self._generator(content).generate(record)
        assert result.error is ExtractionError.MARKER_MISSING
        assert result.content == MARKER_MISSING_MESSAGE

    def test_client_returning_non_string(self, record: ModuleRecord) -> None:
        result = ReadmeGenerator(_mock_client([1, 2]), model="m").generate(record)
        assert result.error is ExtractionError.MARKER_MISSING
        assert result.content == MARKER_MISSING_MESSAGE
