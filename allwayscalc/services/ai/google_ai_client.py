"""Gemini access for AllWaysCalc.

Every model call in the app goes through :class:`GoogleAIClient`; it owns the
process-wide ``genai.configure`` call, caches model handles and turns SDK
failures into :class:`GoogleAIClientError`.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import google.generativeai as genai
from flask import current_app

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_TIMEOUT_SECONDS = 45


class GoogleAIClientError(RuntimeError):
    """Gemini could not produce an answer (configuration, network or provider error)."""


@dataclass(slots=True)
class GoogleAIResult:
    text: str
    raw: Any
    finish_reason: str | None = None


class GoogleAIClient:
    _lock = threading.Lock()
    _active_key: str | None = None

    def __init__(self, api_key: str | None, *, default_model: str | None = None,
                 request_timeout: int = DEFAULT_TIMEOUT_SECONDS) -> None:
        if not api_key:
            raise GoogleAIClientError("GOOGLE_AI_API_KEY is not configured.")
        self.api_key = api_key
        self.default_model = default_model or DEFAULT_MODEL
        self.request_timeout = request_timeout
        self._model_cache: dict[str, genai.GenerativeModel] = {}
        self._ensure_global_configuration()

    @classmethod
    def from_app(cls) -> "GoogleAIClient":
        cfg = current_app.config
        return cls(
            cfg.get("GOOGLE_AI_API_KEY"),
            default_model=cfg.get("GOOGLE_AI_DEFAULT_MODEL"),
            request_timeout=int(cfg.get("GOOGLE_AI_REQUEST_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS),
        )

    def _ensure_global_configuration(self) -> None:
        # genai keeps its key in module state, so switch it at most once per key.
        owner = type(self)
        with owner._lock:
            if owner._active_key != self.api_key:
                genai.configure(api_key=self.api_key)
                owner._active_key = self.api_key
                logger.debug("Configured google-generativeai client")

    def model(self, name: str | None = None) -> genai.GenerativeModel:
        name = name or self.default_model
        if name not in self._model_cache:
            self._model_cache[name] = genai.GenerativeModel(model_name=name)
        return self._model_cache[name]

    def generate_content(
        self,
        *,
        contents: Sequence[Mapping[str, Any]],
        model: str | None = None,
        generation_config: Mapping[str, Any] | None = None,
    ) -> GoogleAIResult:
        """Send one request and return the full text of the first candidate."""
        if not contents:
            raise GoogleAIClientError("Gemini requests require at least one content block.")

        options: dict[str, Any] = {"request_options": {"timeout": self.request_timeout}}
        if generation_config:
            options["generation_config"] = dict(generation_config)

        try:
            response = self.model(model).generate_content(list(contents), **options)
        except Exception as exc:  # pragma: no cover - provider/network failures
            raise GoogleAIClientError(f"Gemini request failed: {exc}") from exc

        candidate = _first_candidate(response)
        return GoogleAIResult(
            text=_response_text(response, candidate),
            raw=response,
            finish_reason=_reason_name(getattr(candidate, "finish_reason", None)),
        )


def _first_candidate(response: Any) -> Any:
    candidates = getattr(response, "candidates", None) or ()
    return candidates[0] if candidates else None


def _response_text(response: Any, candidate: Any) -> str:
    parts = getattr(getattr(candidate, "content", None), "parts", None) or ()
    texts = [part.text for part in parts if getattr(part, "text", None)]
    if texts:
        return "".join(texts)
    try:
        return getattr(response, "text", "") or ""
    except ValueError:
        # blocked responses carry no text parts
        return ""


def _reason_name(reason: Any) -> str | None:
    if reason is None:
        return None
    return getattr(reason, "name", None) or str(reason)
