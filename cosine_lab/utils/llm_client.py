"""LLM client for OpenAI-compatible chat APIs.

The AI bridge talks to the model exclusively through this client, so
swapping providers never touches prompt or parsing code.

Environment Variables:
    DASHSCOPE_API_KEY: API key for Aliyun Dashscope (checked first)
    OPENAI_API_KEY: API key for OpenAI

Example:
    >>> # .env file:
    >>> # OPENAI_API_KEY=sk-xxx
    >>>
    >>> from cosine_lab.utils.llm_client import LLMClient
    >>> client = LLMClient()  # Auto-detects OpenAI, uses gpt-4o-mini
    >>> text = client.json_completion("Return {\"ok\": true}")
"""

import os
import logging
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv
from openai import OpenAI

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# (env var, provider, default model, base url per region); None = openai library default
PROVIDERS = (
    ("DASHSCOPE_API_KEY", "dashscope", "qwen-plus", {
        "cn": "https://dashscope.aliyuncs.com/compatible-mode/v1",
        "intl": "https://dashscope-intl.aliyuncs.com/compatible-mode/v1",
    }),
    ("OPENAI_API_KEY", "openai", "gpt-4o-mini", None),
)
FALLBACK_MODEL = "gpt-4o-mini"


def _detect_provider() -> Tuple[Optional[str], Optional[str], Optional[str], Optional[Dict[str, str]]]:
    """Find the first provider whose API key is set in the environment."""
    for env_var, provider, model, base_urls in PROVIDERS:
        key = os.getenv(env_var)
        if key:
            return key, provider, model, base_urls
    return None, None, None, None


class LLMClient:
    """Client for OpenAI-compatible LLM APIs.

    An explicit api_key is treated as a custom provider: base_url and
    default_model then come only from the arguments.
    """

    def __init__(
        self,
        api_key: str = None,
        base_url: str = None,
        default_model: str = None,
        timeout: int = 60,
        region: str = "cn",
    ):
        """Initialize the LLM client.

        Args:
            api_key: API key. Falls back to DASHSCOPE_API_KEY or OPENAI_API_KEY.
            base_url: Custom base URL; overrides the provider's.
            default_model: Model used when a call names none.
            timeout: Request timeout in seconds.
            region: Dashscope region ("cn" or "intl").

        Raises:
            ValueError: If no API key is available.
        """
        provider_model = None
        provider_urls = None
        self._provider = None

        if api_key:
            self.api_key = api_key
        else:
            self.api_key, self._provider, provider_model, provider_urls = _detect_provider()

        if not self.api_key:
            raise ValueError(
                "API key is required. Set DASHSCOPE_API_KEY or OPENAI_API_KEY "
                "environment variable, or pass api_key parameter."
            )

        if base_url:
            self.base_url = base_url
        elif provider_urls:
            self.base_url = provider_urls.get(region, provider_urls["cn"])
        else:
            self.base_url = None

        self.default_model = default_model or provider_model or FALLBACK_MODEL
        self.timeout = timeout

        client_kwargs: Dict[str, Any] = {"api_key": self.api_key, "timeout": timeout}
        if self.base_url:
            client_kwargs["base_url"] = self.base_url
        self.client = OpenAI(**client_kwargs)

        logger.info(
            f"LLM Client initialized (provider={self.provider}, "
            f"model={self.default_model})"
        )

    def chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.0,
        max_tokens: int = None,
        **kwargs,
    ) -> str:
        """Generate a chat completion.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
            model: Model to use. Defaults to self.default_model.
            temperature: Sampling temperature (0.0 = deterministic).
            max_tokens: Maximum tokens in response.
            **kwargs: Additional arguments passed to the API.

        Returns:
            The assistant's response content; empty string if the model
            returned no content.

        Raises:
            RuntimeError: If the API call fails.
        """
        request: Dict[str, Any] = {
            "model": model or self.default_model,
            "messages": messages,
            "temperature": temperature,
            **kwargs,
        }
        if max_tokens:
            request["max_tokens"] = max_tokens

        try:
            response = self.client.chat.completions.create(**request)
        except Exception as e:
            logger.error(f"LLM API call failed: {e}")
            raise RuntimeError(f"LLM API call failed: {e}") from e

        # Content filtering can leave an otherwise successful response empty
        if not response.choices:
            logger.error(f"LLM API returned no choices ({request['model']})")
            raise RuntimeError("LLM API returned no choices")

        content = response.choices[0].message.content or ""
        logger.debug(f"LLM response ({request['model']}): {content[:100]}...")
        return content

    def json_completion(
        self,
        prompt: str,
        model: str = None,
        temperature: float = 0.0,
    ) -> str:
        """Single-prompt completion in JSON mode.

        Returns the raw response text; parsing is left to the caller.

        Raises:
            RuntimeError: If the API call fails.
        """
        return self.chat_completion(
            messages=[{"role": "user", "content": prompt}],
            model=model,
            temperature=temperature,
            response_format={"type": "json_object"},
        )

    def health_check(self) -> bool:
        """Check if the LLM service answers a minimal request."""
        try:
            self.chat_completion(messages=[{"role": "user", "content": "Hi"}], max_tokens=5)
        except RuntimeError as e:
            logger.warning(f"LLM service health check failed: {e}")
            return False
        logger.info("LLM service health check passed")
        return True

    @property
    def provider(self) -> str:
        """Get the detected provider name."""
        return self._provider or "custom"
