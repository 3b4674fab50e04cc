import logging
import os
from typing import Any

import openai
from openai import OpenAI

from writecheck.llm.llm_client import LLMClient
from writecheck.services.errors import AuthError, TransportError

logger = logging.getLogger(__name__)


class OpenAIClient(LLMClient):
    def __init__(
        self,
        model_name: str,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        client: OpenAI | None = None,
    ):
        self.model_name = model_name
        self.temperature = temperature
        self.max_tokens = max_tokens
        # Client wird erst beim ersten Call gebaut, damit ein fehlender Key
        # als AuthError (und nicht schon beim Import) auffällt.
        self._client = client

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not os.getenv("OPENAI_API_KEY"):
                raise AuthError("OPENAI_API_KEY is not configured on the server")
            # Liest OPENAI_API_KEY automatisch aus der Umgebung;
            # max_retries=0: genau ein Versuch pro Nutzer-Aktion
            self._client = OpenAI(max_retries=0)
        return self._client

    def complete(self, prompt: str, **kwargs: Any) -> str:
        messages = []
        system = kwargs.get("system")
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        client = self._get_client()
        try:
            response = client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                temperature=kwargs.get("temperature", self.temperature),
                max_tokens=kwargs.get("max_tokens", self.max_tokens),
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            logger.warning("OpenAI rejected credentials: %s", e)
            raise AuthError("Invalid OpenAI API key") from e
        except openai.RateLimitError as e:
            raise TransportError(
                "OpenAI API rate limit exceeded. Please try again later.",
                status_code=503,
                upstream_status=429,
            ) from e
        except (openai.APIConnectionError, openai.APITimeoutError) as e:
            raise TransportError(f"OpenAI API error: {e}") from e
        except openai.APIStatusError as e:
            raise TransportError(f"OpenAI API error: {e}", upstream_status=e.status_code) from e

        return (response.choices[0].message.content or "").strip()
