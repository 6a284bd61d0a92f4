"""Logging utilities for Shapelab."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class InteractionStats:
    """Statistics from an interactive session."""

    drags_started: int = 0
    drag_moves: int = 0
    evaluations: int = 0
    pair_tests: int = 0
    last_intersections: list[tuple[str, str]] = field(default_factory=list)

    @property
    def avg_pair_tests(self) -> float:
        """Average number of shape pairs tested per evaluation."""
        if self.evaluations:
            return self.pair_tests / self.evaluations
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("shapelab")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger(name: str = "shapelab") -> structlog.stdlib.BoundLogger:
    """Get a bound logger that writes through stdlib logging.

    Unlike structlog's default logger it prints nothing until
    configure_logging (or the embedding application) sets up handlers and
    levels.

    Args:
        name: Stdlib logger name

    Returns:
        Bound logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class InteractionLogger:
    """Logger for tracking drag interaction and intersection statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = InteractionStats()

    def log_drag_start(self, shape_name: str, anchor_index: int, x: float, y: float) -> None:
        """Log the start of a drag gesture."""
        self._logger.debug(
            "Drag started",
            shape=shape_name,
            anchor=anchor_index,
            x=round(x, 2),
            y=round(y, 2),
        )
        self._stats.drags_started += 1

    def log_drag_move(self, shape_name: str, anchor_index: int, dx: float, dy: float) -> None:
        """Log one pointer move of an active drag."""
        self._logger.debug(
            "Anchor dragged",
            shape=shape_name,
            anchor=anchor_index,
            dx=round(dx, 2),
            dy=round(dy, 2),
        )
        self._stats.drag_moves += 1

    def log_drag_end(self, shape_name: str, anchor_index: int) -> None:
        """Log the end of a drag gesture."""
        self._logger.debug("Drag ended", shape=shape_name, anchor=anchor_index)

    def log_pick_miss(self, x: float, y: float) -> None:
        """Log a pointer press that grabbed no anchor."""
        self._logger.debug("No anchor under pointer", x=round(x, 2), y=round(y, 2))

    def log_evaluation(
        self,
        shape_count: int,
        pair_tests: int,
        intersections: list[tuple[str, str]],
    ) -> None:
        """Log the result of an intersection pass."""
        self._logger.info(
            "Intersections evaluated",
            shapes=shape_count,
            pairs_tested=pair_tests,
            intersecting=len(intersections),
        )
        self._stats.evaluations += 1
        self._stats.pair_tests += pair_tests
        self._stats.last_intersections = list(intersections)

    @property
    def stats(self) -> InteractionStats:
        """Get current interaction statistics."""
        return self._stats
