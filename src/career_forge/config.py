# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Runtime settings for Career Forge.

Everything is read from the environment once, in Settings.from_env().
CA bundle resolution for outbound HTTPS checks (in priority order):
  1. Explicit override via --ca-bundle CLI arg
  2. REQUESTS_CA_BUNDLE environment variable
  3. CURL_CA_BUNDLE environment variable
  4. SSL_CERT_FILE environment variable
  5. System defaults (True, delegates to certifi / OS trust store)
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class Settings:
    """Configuration shared by the session, the analysis client and the CLI."""
    gemini_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    provider: str = "gemini"
    model: Optional[str] = None
    real_extraction: bool = False
    data_dir: str = "user_content"
    ca_bundle_override: Optional[str] = None

    # Cosmetic timers (seconds / percent)
    progress_step: int = 10
    progress_interval: float = 0.2
    progress_cap: int = 90
    commit_delay: float = 0.5
    simulator_step: int = 2
    simulator_interval: float = 0.1

    @classmethod
    def from_env(cls, ca_bundle: Optional[str] = None) -> "Settings":
        provider = os.environ.get("CAREER_FORGE_PROVIDER", "").strip().lower()
        if not provider:
            provider = "openai" if os.environ.get("OPENAI_API_KEY") and not os.environ.get("GEMINI_API_KEY") else "gemini"
        settings = cls(
            gemini_api_key=os.environ.get("GEMINI_API_KEY"),
            openai_api_key=os.environ.get("OPENAI_API_KEY"),
            provider=provider,
            model=os.environ.get("CAREER_FORGE_MODEL") or None,
            real_extraction=_env_flag("CAREER_FORGE_REAL_EXTRACTION"),
            data_dir=os.environ.get("CAREER_FORGE_DATA_DIR", "user_content"),
            ca_bundle_override=ca_bundle,
        )
        logger.debug(f"Settings loaded (provider={settings.provider}, real_extraction={settings.real_extraction})")
        return settings

    @property
    def api_key(self) -> Optional[str]:
        """Key for the selected provider only; keys are never sent across providers."""
        if self.provider == "openai":
            return self.openai_api_key
        return self.gemini_api_key

    def get_ca_bundle(self) -> "str | bool":
        """
        Resolve the CA bundle to use for outbound HTTPS requests.

        Returns:
            str: Path to a CA bundle file, or
            bool: True to use the default system/certifi trust store.
        """
        if self.ca_bundle_override:
            return self.ca_bundle_override

        for var in ("REQUESTS_CA_BUNDLE", "CURL_CA_BUNDLE", "SSL_CERT_FILE"):
            value = os.environ.get(var)
            if value:
                logger.debug(f"Using CA bundle from {var}: {value}")
                return value

        return True

    def configure_ssl_env(self) -> None:
        """
        Export a custom CA bundle as SSL_CERT_FILE for httpx-based SDKs
        (Google GenAI, OpenAI), which do not read REQUESTS_CA_BUNDLE.
        """
        bundle = self.get_ca_bundle()
        if isinstance(bundle, str) and os.environ.get("SSL_CERT_FILE") != bundle:
            os.environ["SSL_CERT_FILE"] = bundle
            logger.debug(f"Set SSL_CERT_FILE={bundle} for SDK clients")
