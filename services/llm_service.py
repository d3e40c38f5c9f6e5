"""Thin wrapper around an OpenAI-compatible chat-completions endpoint.

This is the transport the summarizer talks to: prompt in, raw text out, or an
``LLMError`` describing why the provider refused.  It deliberately performs no
retries and sets no timeout of its own beyond the SDK's defaults.
"""

from __future__ import annotations

import logging
from typing import Any

import openai
from openai import AsyncOpenAI

logger = logging.getLogger("summarist.services.llm")

INVALID_CREDENTIAL_CODE = "invalid_api_key"
# Some OpenAI-compatible gateways (e.g. Gemini's) report this instead.
_CREDENTIAL_MARKERS = ("API_KEY_INVALID", INVALID_CREDENTIAL_CODE)


class LLMError(Exception):
    """Raised when the provider call fails.

    ``code`` is the provider's machine-readable error code when it sent one.
    """

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code

    @property
    def is_credential_rejection(self) -> bool:
        if self.code in _CREDENTIAL_MARKERS:
            return True
        return any(marker in str(self) for marker in _CREDENTIAL_MARKERS)


class LLMClient:
    """Holds one ``AsyncOpenAI`` handle; create once and reuse across calls."""

    def __init__(self, api_key: str, *, base_url: str | None = None) -> None:
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url or None)

    async def generate(
        self,
        model: str,
        prompt: str,
        *,
        temperature: float,
        json_response: bool = True,
    ) -> str:
        """Send *prompt* as a single user message and return the reply text.

        Parameters
        ----------
        model : str
            Model identifier understood by the endpoint.
        prompt : str
            Full instruction text.
        temperature : float
            Sampling temperature.
        json_response : bool
            Request JSON-object output mode.

        Returns
        -------
        str
            Raw text content of the assistant reply, unvalidated.
        """
        kwargs: dict[str, Any] = {
            "model": model,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if json_response:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except openai.AuthenticationError as exc:
            logger.error("LLM rejected the credential: %s", exc)
            raise LLMError(str(exc), code=INVALID_CREDENTIAL_CODE) from exc
        except openai.APIError as exc:
            logger.error("LLM call failed: %s", exc)
            raise LLMError(exc.message, code=getattr(exc, "code", None)) from exc

        if not response.choices or response.choices[0].message.content is None:
            raise LLMError("LLM returned empty content.")
        return response.choices[0].message.content

    async def close(self) -> None:
        await self._client.close()
