"""Chat clients for the README prompt.

Two transports share one interface, ``complete(request) -> str``:
an OpenAI-style chat-completions client over httpx (Groq, OpenAI) and
a client built on the Anthropic SDK. Neither retries; errors raised
here are turned into in-band results by the README generator.
"""

import logging
from typing import Any, Optional, Protocol

import anthropic
import httpx

from readme_generator.generators.prompt import PromptRequest
from readme_generator.utils.config import ProviderConfig

logger = logging.getLogger(__name__)

NO_README = "No README generated."


class ChatClient(Protocol):
    """Anything that can answer a PromptRequest with raw text."""

    def complete(self, request: PromptRequest) -> str: ...


def first_message_content(body: Any) -> str:
    """Return ``choices[0].message.content`` as text, or NO_README.

    A list of content parts is joined from its ``text`` entries. Any other
    non-string content counts as absent.
    """
    try:
        content = body["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return NO_README

    if isinstance(content, list):
        content = "".join(
            part["text"]
            for part in content
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
    if not isinstance(content, str) or not content:
        return NO_README
    return content


class ChatCompletionsClient:
    """Client for OpenAI-compatible ``chat/completions`` endpoints."""

    def __init__(
        self,
        config: ProviderConfig,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Validated provider settings.
            http_client: Optional httpx client, mainly for tests. One is
                created per request otherwise.
        """
        self.config = config
        self._http_client = http_client
        self._headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        }

    def complete(self, request: PromptRequest) -> str:
        """POST the request and return the first message's content.

        Raises:
            httpx.HTTPError: On transport failure or a non-2xx status.
            ValueError: If the response body is not JSON.
        """
        logger.info("Requesting README from %s (%s)", self.config.url, request.model)
        if self._http_client is not None:
            response = self._post(self._http_client, request)
        else:
            with httpx.Client(timeout=self.config.timeout) as client:
                response = self._post(client, request)

        response.raise_for_status()
        body = response.json()

        usage = body.get("usage") if isinstance(body, dict) else None
        if usage:
            logger.info(
                "Token usage: %s prompt, %s completion",
                usage.get("prompt_tokens"),
                usage.get("completion_tokens"),
            )
        return first_message_content(body)

    def _post(self, client: httpx.Client, request: PromptRequest) -> httpx.Response:
        return client.post(
            self.config.url, json=request.payload(), headers=self._headers
        )


class AnthropicClient:
    """Client sending the prompt through the Anthropic Messages API."""

    def __init__(self, config: ProviderConfig) -> None:
        self.config = config
        self._client: Optional[anthropic.Anthropic] = None

    @property
    def client(self) -> anthropic.Anthropic:
        """Lazily initialize the Anthropic client."""
        if self._client is None:
            self._client = anthropic.Anthropic(
                api_key=self.config.api_key,
                base_url=self.config.base_uri,
                timeout=self.config.timeout,
                max_retries=0,
            )
        return self._client

    def complete(self, request: PromptRequest) -> str:
        """Send the prompt and join the text blocks of the reply.

        Raises:
            anthropic.APIError: If the API call fails.
        """
        logger.info("Requesting README from Anthropic (%s)", request.model)
        response = self.client.messages.create(
            model=request.model,
            max_tokens=request.max_tokens,
            messages=[{"role": "user", "content": request.prompt}],
        )

        text = "".join(
            getattr(block, "text", "") for block in response.content or []
        )
        logger.info(
            "Token usage: %d input, %d output",
            response.usage.input_tokens,
            response.usage.output_tokens,
        )
        return text or NO_README


def create_client(config: ProviderConfig) -> ChatClient:
    """Pick the transport for a provider."""
    if config.provider == "anthropic":
        return AnthropicClient(config)
    return ChatCompletionsClient(config)
