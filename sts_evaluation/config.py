from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .compute import MAX_OUT, MIN_OUT
from .service import RETINA_HOST
from .types import RetinaVariant


class EvaluationSettings(BaseSettings):
    """Environment configuration, read from ``STS_EVAL_*`` variables or a ``.env`` file"""

    model_config = SettingsConfigDict(
        env_prefix="STS_EVAL_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    retina_host: str = Field(default=RETINA_HOST)
    request_timeout: float = Field(default=60.0, gt=0)
    log_level: str = Field(default="INFO")


@dataclass(frozen=True)
class RunConfig:
    """Configuration of a single scoring run, passed to every stage"""

    retina: RetinaVariant = RetinaVariant.EN_ASSOCIATIVE
    keywords: bool = False
    min_out: float = MIN_OUT
    max_out: float = MAX_OUT
