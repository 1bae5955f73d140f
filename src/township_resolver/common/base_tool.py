"""
Township Resolver — Base Batch Tool
====================================
Abstract runner for jobs that read one file and write another.

``run()`` fixes the order validate → process → report.  Subclasses supply
the three steps; the report is where each tool states its own outcome
(the township resolver logs how many addresses resolved).
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger("township_resolver")

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s — %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Attach one console handler to the package logger.

    Repeated calls only adjust the level: DEBUG when *verbose*, else INFO.
    """
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


class BatchTool(ABC):
    """File-to-file batch job.

    Attributes:
        input_path: The file the job reads.
        output_path: The file the job writes.  Never the same file as
            ``input_path``.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        *,
        verbose: bool = False,
    ) -> None:
        self.input_path: Path = Path(input_path)
        self.output_path: Path = Path(output_path)
        configure_logging(verbose)

    @abstractmethod
    def validate_inputs(self) -> None:
        """Check preconditions.  Must not touch the output file."""

    @abstractmethod
    def process(self) -> None:
        """Do the work and write :attr:`output_path`."""

    @abstractmethod
    def _report_success(self, elapsed: float) -> None:
        """Log the outcome of a completed run taking *elapsed* seconds."""

    def run(self) -> None:
        """Validate, process, then report.

        Raises:
            Any exception from ``validate_inputs`` or ``process``
            propagates unchanged; the report step is then skipped.
        """
        logger.info("%s: %s → %s", self.__class__.__name__, self.input_path, self.output_path)
        start = time.perf_counter()

        self.validate_inputs()
        self.process()

        self._report_success(time.perf_counter() - start)
