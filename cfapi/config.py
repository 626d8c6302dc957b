from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from cfapi.codeforces.signing import API_BASE
from cfapi.codeforces.testcases import SITE_BASE

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_FILE = _PROJECT_ROOT / '.env'
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE)


@dataclass(slots=True)
class Settings:
    """Credentials and endpoints for code that wraps the client (tests, scripts).

    The client itself never reads these; they are passed to it explicitly.
    """

    api_key: str | None = field(default_factory=lambda: os.getenv('CODEFORCES_API_KEY') or None)
    api_secret: str | None = field(default_factory=lambda: os.getenv('CODEFORCES_API_SECRET') or None)
    api_base: str = field(default_factory=lambda: os.getenv('CODEFORCES_API_BASE', API_BASE))
    site_base: str = field(default_factory=lambda: os.getenv('CODEFORCES_SITE_BASE', SITE_BASE))
    timeout: float = field(default_factory=lambda: float(os.getenv('CODEFORCES_TIMEOUT', 10.0)))
    live_tests: bool = field(default_factory=lambda: os.getenv('CODEFORCES_LIVE_TESTS') == '1')

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)


settings = Settings()
