"""Logging utilities for Glyphbold."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from glyphbold.domain import RenderResult

# Handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics accumulated over render passes."""

    pass_count: int = 0
    contours_built: int = 0
    contours_painted: int = 0
    contours_skipped: int = 0
    rejected_count: int = 0
    failed_count: int = 0
    last_duration_ms: float = 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphbold")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render passes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_pass_start(self, text: str, boldness: float, sampling_resolution: float) -> None:
        """Log start of a render pass."""
        self._logger.debug(
            "Render pass started",
            text=text,
            boldness=boldness,
            sampling=sampling_resolution,
        )

    def log_pass_complete(self, result: "RenderResult", duration_ms: float) -> None:
        """Log a finished render pass."""
        self._logger.info(
            "Render pass complete",
            contours=result.contour_count,
            roots=result.root_count,
            painted=len(result.commands),
            skipped=result.skipped,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.pass_count += 1
        self._stats.contours_built += result.contour_count
        self._stats.contours_painted += len(result.commands)
        self._stats.contours_skipped += result.skipped
        self._stats.last_duration_ms = duration_ms

    def log_contour_skipped(self, point_count: int, error: Exception) -> None:
        """Log a contour dropped as degenerate."""
        self._logger.warning(
            "Contour skipped",
            points=point_count,
            reason=str(error),
        )

    def log_rejected_parameter(self, error: Exception) -> None:
        """Log a parameter change that was refused."""
        self._logger.warning(
            "Render parameters rejected",
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.rejected_count += 1

    def log_pass_failed(self, text: str, error: Exception) -> None:
        """Log a pass abandoned because the outline could not be built."""
        self._logger.error(
            "Render pass failed",
            text=text,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_count += 1

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
