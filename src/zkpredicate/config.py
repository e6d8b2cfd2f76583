"""
Guest configuration: the predefined value the predicate compares against.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from zkpredicate.exceptions import ConfigError
from zkpredicate.serialization import UINT256_MAX


PREDEFINED_NUMBER = 12345

CONFIG_ENV_VAR = "ZKPREDICATE_CONFIG"


@dataclass(frozen=True)
class GuestConfig:
    """Immutable settings for one guest build."""

    expected: int = PREDEFINED_NUMBER

    def __post_init__(self):
        if isinstance(self.expected, bool) or not isinstance(self.expected, int):
            raise ConfigError(f"expected must be an integer, got {type(self.expected).__name__}")
        if self.expected < 0 or self.expected > UINT256_MAX:
            raise ConfigError("expected is out of range for uint256")


def _parse_expected(raw) -> int:
    # TOML integers stop at 2**63 - 1, so larger constants come in as strings
    if isinstance(raw, bool):
        raise ConfigError("expected must be an integer or a numeric string")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip().replace("_", ""), 0)
        except ValueError:
            raise ConfigError(f"expected is not a valid number: {raw!r}")
    raise ConfigError("expected must be an integer or a numeric string")


def load_config(path: Optional[str | Path] = None) -> GuestConfig:
    """
    Load the guest configuration from a TOML file.

    Args:
        path: Config file path. Defaults to $ZKPREDICATE_CONFIG; when neither
              is set the built-in defaults are used.

    Returns:
        GuestConfig

    Raises:
        ConfigError: If the file is missing, malformed, or has a bad value
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return GuestConfig()

    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file does not exist: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}")

    guest = data.get("guest", {})
    if not isinstance(guest, dict):
        raise ConfigError(f"[guest] must be a table in {config_path}")
    if "expected" not in guest:
        return GuestConfig()

    return GuestConfig(expected=_parse_expected(guest["expected"]))
