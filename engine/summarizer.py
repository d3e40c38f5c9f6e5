"""Summarization Orchestrator — prompt, provider call, validation."""

from __future__ import annotations

import logging
from typing import Callable

from config import Settings, credential_configured, settings as default_settings
from engine.errors import ConfigError, TransportError
from engine.prompt_builder import build_prompt
from engine.response_parser import parse_result
from schemas.request import SummarizationRequest
from schemas.response import SummarizationResult
from services.llm_service import LLMClient, LLMError

logger = logging.getLogger("summarist.engine.summarizer")

ClientFactory = Callable[[Settings], LLMClient]


def _default_client_factory(cfg: Settings) -> LLMClient:
    return LLMClient(cfg.openai_api_key, base_url=cfg.openai_base_url or None)


class Summarizer:
    """Runs one summarization end to end.

    The LLM client is created on the first call that passes the credential
    check and reused afterwards.  Persisting the result is left to the caller
    so failed attempts never reach the history.
    """

    def __init__(
        self,
        cfg: Settings | None = None,
        *,
        client_factory: ClientFactory = _default_client_factory,
    ) -> None:
        self._settings = cfg or default_settings
        self._client_factory = client_factory
        self._client: LLMClient | None = None

    @property
    def configured(self) -> bool:
        return credential_configured(self._settings.openai_api_key)

    def _require_client(self) -> LLMClient:
        if self._client is None:
            if not self.configured:
                raise ConfigError("LLM API key is not configured")
            self._client = self._client_factory(self._settings)
        return self._client

    async def summarize(self, request: SummarizationRequest) -> SummarizationResult:
        """Return the validated summary for *request*.

        Raises ``ConfigError``, ``TransportError``, ``ParseError`` or
        ``SchemaError``; none of them leave this instance unusable.
        """
        client = self._require_client()
        prompt = build_prompt(request.content, request.length, request.format, request.focus_area)

        logger.debug(
            "Summarizing %d chars (length=%s, format=%s, focus=%r)",
            len(request.content),
            request.length.value,
            request.format.value,
            request.focus_area,
        )

        try:
            raw = await client.generate(
                self._settings.openai_model,
                prompt,
                temperature=self._settings.summary_temperature,
                json_response=True,
            )
        except LLMError as exc:
            if exc.is_credential_rejection:
                raise ConfigError("invalid credential") from exc
            raise TransportError(str(exc)) from exc

        result = parse_result(raw)
        logger.info(
            "Summary complete — %d insight(s), %d action(s), %d question(s)",
            len(result.key_insights),
            len(result.actionable_items),
            len(result.suggested_questions),
        )
        return result

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
