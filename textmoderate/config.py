from dataclasses import dataclass, field
import os
from typing import Dict, List
from dotenv import load_dotenv
load_dotenv()

@dataclass
class Settings:
    token: str
    perspective_api_key: str
    language: str
    placeholder: str
    empty_list: bool
    extra_words: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    notice_seconds: int = 20

    def moderator_kwargs(self) -> Dict:
        return {
            "empty_list": self.empty_list,
            "words": self.extra_words,
            "exclude": self.exclude,
            "placeholder": self.placeholder,
            "sentiment_options": {"language": self.language},
        }

def _to_int(x, default: int) -> int:
    try: return int(x) if x else default
    except ValueError: return default

def _to_bool(x) -> bool:
    return (x or "").strip().lower() in {"1", "true", "yes"}

def _to_list(x) -> List[str]:
    return [w.strip() for w in (x or "").split(",") if w.strip()]

def load_settings() -> Settings:
    return Settings(
        token=os.getenv("DISCORD_TOKEN", ""),
        perspective_api_key=os.getenv("PERSPECTIVE_API_KEY", ""),
        language=os.getenv("MODERATE_LANGUAGE", "en"),
        placeholder=os.getenv("MODERATE_PLACEHOLDER", "*"),
        empty_list=_to_bool(os.getenv("MODERATE_EMPTY_LIST")),
        extra_words=_to_list(os.getenv("MODERATE_EXTRA_WORDS")),
        exclude=_to_list(os.getenv("MODERATE_EXCLUDE")),
        notice_seconds=_to_int(os.getenv("NOTICE_SECONDS"), 20),
    )

SETTINGS = load_settings()
