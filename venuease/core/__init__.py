"""
Core utilities and configuration for VenuEase.

This package provides core functionality including logging configuration,
the database layer, the ad-hoc query executor and other shared utilities.
"""

from venuease.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
