from dataclasses import dataclass
from typing import Optional
import math
import os
from dotenv import load_dotenv

from img2txt.constants import (
    BASE_URL,
    DEFAULT_LOG_LEVEL,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_LOG_LEVEL,
    ENV_SETTLE_DELAY,
    ENV_TIMEOUT,
    ERR_ENV_NOT_NUMBER,
    ERR_ENV_NOT_SET,
    SETTLE_DELAY_SECONDS,
)
from img2txt.errors import ConfigurationError


def _parse_seconds(name: str, raw: Optional[str]) -> Optional[float]:
    match raw:
        case None | "":
            return None
        case _:
            try:
                value = float(raw)
            except ValueError:
                raise ConfigurationError(ERR_ENV_NOT_NUMBER % (name, raw)) from None
            match value:
                case v if not math.isfinite(v) or v < 0:
                    raise ConfigurationError(ERR_ENV_NOT_NUMBER % (name, raw))
                case v:
                    return v


@dataclass(frozen=True)
class Config:
    api_key: str
    base_url: str = BASE_URL
    settle_delay: float = SETTLE_DELAY_SECONDS
    timeout: Optional[float] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv(ENV_API_KEY)
        base_url = os.getenv(ENV_BASE_URL) or BASE_URL
        settle_delay = _parse_seconds(ENV_SETTLE_DELAY, os.getenv(ENV_SETTLE_DELAY))
        timeout = _parse_seconds(ENV_TIMEOUT, os.getenv(ENV_TIMEOUT))
        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

        match api_key:
            case None | "":
                raise ConfigurationError(ERR_ENV_NOT_SET % ENV_API_KEY)
            case _:
                pass

        return cls(
            api_key=api_key,
            base_url=base_url,
            settle_delay=SETTLE_DELAY_SECONDS if settle_delay is None else settle_delay,
            timeout=timeout,
            log_level=log_level,
        )
