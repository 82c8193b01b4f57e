# snibbets/utils/__init__.py
"""Utility modules for Snibbets."""

from snibbets.utils.logger import logger, setup_logger, log_exception

__all__ = ["logger", "setup_logger", "log_exception"]
