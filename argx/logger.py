# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argx."""
import logging

logger: logging.Logger = logging.getLogger("argx")
