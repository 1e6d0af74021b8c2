"""
Generation endpoint client.

Provides the PlanGeneratorClient class, the only component that talks to the
external text-generation service. It owns timeout, retry and error
classification for that call and returns the raw text payload untouched;
parsing happens in services.response_normalizer.
"""

import logging
from typing import Optional

from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI

from application.exceptions import NetworkError, NotConfigured, UpstreamError
from backend.ai.retry import retry_async_call
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)


class PlanGeneratorClient:
    """
    Client for an OpenAI-compatible chat-completions endpoint.

    The credential and endpoint are injected at construction so the client
    can be pointed at a fake endpoint in tests. A client built without a
    credential can still be constructed; every call then raises NotConfigured.
    """

    NOT_CONFIGURED_MESSAGE = (
        "AI features are not configured. Set OPENAI_API_KEY to enable "
        "workout generation."
    )

    DEFAULT_MODEL = "gpt-4o-mini"
    DEFAULT_TIMEOUT_SECONDS = 30.0
    TEMPERATURE = 0.7
    MAX_TOKENS = 2000

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        max_attempts: int = 1,
    ):
        """
        Initialize the client.

        Args:
            api_key: Generation endpoint API key (None means not configured)
            base_url: Endpoint base URL (None uses the OpenAI default)
            model: Model to use
            timeout_seconds: Per-request timeout
            max_attempts: Attempts per call; 1 disables retries
        """
        self._model = model
        self._max_attempts = max_attempts
        self._client: Optional[AsyncOpenAI] = None
        if api_key:
            # Retries are handled by retry_async_call, not by the SDK
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout_seconds,
                max_retries=0,
            )

    @property
    def is_configured(self) -> bool:
        """Check if a credential was provided."""
        return self._client is not None

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        json_mode: bool = False,
        context: Optional[AIRequestContext] = None,
    ) -> str:
        """
        Send a prompt to the generation endpoint and return the raw text.

        Args:
            prompt: User prompt
            system_prompt: Optional system prompt
            json_mode: Ask the endpoint for a JSON object response
            context: AI request context for observability

        Returns:
            Raw response text, exactly as generated

        Raises:
            NotConfigured: If no credential is available
            UpstreamError: On a non-success response or an empty completion
            NetworkError: On connection failures and timeouts
        """
        if self._client is None:
            raise NotConfigured(
                self.NOT_CONFIGURED_MESSAGE,
                setting="openai_api_key",
            )

        return await retry_async_call(
            self._call_llm,
            prompt,
            system_prompt,
            json_mode,
            context,
            max_attempts=self._max_attempts,
        )

    async def _call_llm(
        self,
        prompt: str,
        system_prompt: Optional[str],
        json_mode: bool,
        context: Optional[AIRequestContext],
    ) -> str:
        """
        Make a single chat-completions request.

        Raises:
            UpstreamError: On API status errors or empty content
            NetworkError: On transport failures
        """
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        request_kwargs = {
            "model": self._model,
            "messages": messages,
            "temperature": self.TEMPERATURE,
            "max_tokens": self.MAX_TOKENS,
        }
        if json_mode:
            request_kwargs["response_format"] = {"type": "json_object"}
        if context is not None:
            request_kwargs["extra_headers"] = context.to_tracking_headers()

        try:
            response = await self._client.chat.completions.create(**request_kwargs)
        except APIStatusError as e:
            body = str(e.body) if e.body is not None else e.message
            logger.error(f"Generation endpoint error: {e.status_code} - {body[:200]}")
            raise UpstreamError(
                f"Generation endpoint returned status {e.status_code}",
                upstream_status=e.status_code,
                body=body,
            ) from e
        except APITimeoutError as e:
            logger.error(f"Generation endpoint timeout: {e}")
            raise NetworkError("Generation request timed out") from e
        except APIConnectionError as e:
            logger.error(f"Generation endpoint unavailable: {e}")
            raise NetworkError("Could not reach the generation endpoint") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise UpstreamError("Empty response from generation endpoint")

        return content
