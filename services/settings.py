# services/settings.py
import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

APP_MODE = os.getenv("APP_MODE", "production")

# env key -> bucket option
_NUMERIC_KEYS = {
    "BUCKET_WIDTH": "width",
    "BUCKET_HEIGHT": "height",
    "BUCKET_MARGIN": "margin",
    "BUCKET_LEVEL": "level",
    "BUCKET_FREQUENCY": "frequency",
    "BUCKET_AMPLITUDE": "amplitude",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def bucket_options_from_env(environ=None) -> Dict[str, Any]:
    """
    Bucket options found in the environment (and .env).

    Unset keys are left out so the bucket's own defaults apply.
    Malformed values are logged and skipped; this never raises.
    """
    env = os.environ if environ is None else environ
    options: Dict[str, Any] = {}

    for key, option in _NUMERIC_KEYS.items():
        raw = env.get(key)
        if raw in (None, ""):
            continue
        try:
            options[option] = float(raw)
        except ValueError:
            logging.warning(f"Ignoring {key}={raw!r}: not a number.")

    return options


def animate_from_env(environ=None, default: bool = True) -> bool:
    env = os.environ if environ is None else environ
    raw = (env.get("BUCKET_ANIMATE") or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    logging.warning(f"Ignoring BUCKET_ANIMATE={raw!r}: expected on/off.")
    return default
