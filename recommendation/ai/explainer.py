import hashlib
import json
import logging
from typing import Dict, Any, Optional

import openai

from config import Config
from .prompt_builder import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)


class AIExplainer:
    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key if api_key is not None else Config.OPENAI_API_KEY
        self.client = None
        if self.api_key:
            self.client = openai.OpenAI(api_key=self.api_key)

        self.model = model or Config.OPENAI_MODEL
        self.max_tokens = 700
        self.temperature = 0.3
        self.max_cache_entries = 256

        # In-memory cache: payload hash -> response, oldest entry evicted first
        self.cache: Dict[str, Dict[str, Any]] = {}

    @staticmethod
    def cache_key(profile: Dict[str, Any], engine_output: Dict[str, Any]) -> str:
        payload = json.dumps({"profile": profile, "output": engine_output}, sort_keys=True, default=str)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def get_explanation(self, profile: Dict[str, Any], engine_output: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Generates a narrative explanation for the recommendation results.
        Returns None if the API key is missing or an error occurs; scores
        and ordering are never affected.
        """
        if not self.client:
            logger.warning("⚠️ OpenAI API key not found. Skipping AI explanation.")
            return None

        key = self.cache_key(profile, engine_output)
        if key in self.cache:
            return self.cache[key]

        system_prompt = build_system_prompt()
        user_prompt = build_user_prompt(profile, engine_output)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"}
            )

            content = response.choices[0].message.content
            if not content:
                return None

            parsed_content = json.loads(content)

            if len(self.cache) >= self.max_cache_entries:
                self.cache.pop(next(iter(self.cache)))
            self.cache[key] = parsed_content

            return parsed_content

        except (openai.OpenAIError, json.JSONDecodeError) as e:
            logger.error(f"❌ Error generating AI explanation: {e}")
            return None

# Singleton instance
explainer = AIExplainer()
