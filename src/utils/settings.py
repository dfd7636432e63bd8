"""Runtime configuration read from environment variables.

Call ``load_dotenv()`` before ``Settings.from_env()`` to pick up a local
``.env`` file.
"""

import os
from dataclasses import dataclass

SONAVEEB_BASE_URL = "https://sonaveeb.ee"
API_TIMEOUT_SECONDS = 5.0

SONAVEEB_BACKEND = "sonaveeb"
IN_MEMORY_BACKEND = "in-memory"


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        dictionary_backend: ``"sonaveeb"`` for the live site; anything else
            selects the in-memory dictionary.
        redis_url: Dictionary cache URL. Empty uses an in-memory cache.
        sonaveeb_base_url: Root URL of the Sõnaveeb website.
        sonaveeb_timeout: Per-request timeout in seconds.
        log_level: Root logger level name.
    """
    dictionary_backend: str = IN_MEMORY_BACKEND
    redis_url: str = ""
    sonaveeb_base_url: str = SONAVEEB_BASE_URL
    sonaveeb_timeout: float = API_TIMEOUT_SECONDS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            dictionary_backend=os.getenv("DICTIONARY", IN_MEMORY_BACKEND),
            redis_url=os.getenv("REDIS_URL", ""),
            sonaveeb_base_url=os.getenv("SONAVEEB_BASE_URL", SONAVEEB_BASE_URL),
            sonaveeb_timeout=float(os.getenv("SONAVEEB_TIMEOUT_SECONDS", API_TIMEOUT_SECONDS)),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
