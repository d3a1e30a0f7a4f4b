import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import find_dotenv, load_dotenv


DEFAULT_SELECTOR_CLASS = "snippet-action-copy"
DEFAULT_PAYLOAD_ATTRIBUTE = "data-snippet"
DEFAULT_MARKER_CLASS = "copied"
DEFAULT_REVERT_DELAY_MS = 1000
DEFAULT_CLIPBOARD_BACKEND = "auto"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    selector_class: str = DEFAULT_SELECTOR_CLASS
    payload_attribute: str = DEFAULT_PAYLOAD_ATTRIBUTE
    marker_class: str = DEFAULT_MARKER_CLASS
    revert_delay_ms: int = DEFAULT_REVERT_DELAY_MS
    clipboard_backend: str = DEFAULT_CLIPBOARD_BACKEND

    @property
    def revert_delay(self) -> float:
        return self.revert_delay_ms / 1000.0

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Build settings from ``SNIPCOPY_*`` environment variables.

        A ``.env`` file is loaded first; variables already present in the
        environment win over values from the file.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))
        return cls(
            selector_class=os.getenv(
                "SNIPCOPY_SELECTOR_CLASS", DEFAULT_SELECTOR_CLASS),
            payload_attribute=os.getenv(
                "SNIPCOPY_PAYLOAD_ATTRIBUTE", DEFAULT_PAYLOAD_ATTRIBUTE),
            marker_class=os.getenv(
                "SNIPCOPY_MARKER_CLASS", DEFAULT_MARKER_CLASS),
            revert_delay_ms=_int_env(
                "SNIPCOPY_REVERT_DELAY_MS", DEFAULT_REVERT_DELAY_MS),
            clipboard_backend=os.getenv(
                "SNIPCOPY_CLIPBOARD_BACKEND", DEFAULT_CLIPBOARD_BACKEND).lower(),
        )

    def with_overrides(self, **changes) -> "Settings":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
