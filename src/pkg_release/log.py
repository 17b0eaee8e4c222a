"""
pkg_release.log — Shared structured logger.

Log records go to stderr; stdout is reserved for the archive path printed by
the CLI. The level follows POWERTOOLS_LOG_LEVEL / LOG_LEVEL (default INFO).
"""

from __future__ import annotations

import logging
import sys

from aws_lambda_powertools import Logger

SERVICE_NAME = "pkg-release"

logger = Logger(service=SERVICE_NAME, logger_handler=logging.StreamHandler(sys.stderr))
