"""Secure workspace and collection discovery for .http request files."""

from loguru import logger

__version__ = "0.1.0"

logger.disable("eshttp")
