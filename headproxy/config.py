import os
import logging
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logger.exception("Invalid %s: %r", name, raw)
		return default


def get_optional_float_env(name: str) -> Optional[float]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		value = float(raw)
	except ValueError:
		logger.exception("Invalid %s: %r", name, raw)
		return None
	if value <= 0:
		logger.warning("Ignoring non-positive %s: %r", name, raw)
		return None
	return value


def http_timeout_seconds() -> Optional[float]:
	"""Outbound fetch timeout. None means wait for as long as the remote takes."""
	return get_optional_float_env("HEADPROXY_HTTP_TIMEOUT")


def server_host() -> str:
	return get_str_env("HEADPROXY_HOST", "0.0.0.0")


def server_port() -> int:
	return get_int_env("HEADPROXY_PORT", 8000)


def log_level() -> str:
	return get_str_env("LOG_LEVEL", "INFO").strip().upper()
