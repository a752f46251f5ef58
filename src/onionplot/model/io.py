"""
Export Manager (CSV)
Writes task results as comma-separated text for spreadsheets.
"""
from __future__ import annotations

import csv
import io
import logging
import os
from typing import Iterable

from onionplot.model.task import TaskResult, task_to_text

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "data.csv"
CSV_HEADER = ("task", "iterations", "fitness")


def results_to_csv(results: Iterable[TaskResult]) -> str:
    """Render results as CSV text, one row per result."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for result in results:
        writer.writerow((task_to_text(result.task), result.iterations, result.fitness))
    return buffer.getvalue()


class ExportManager:
    @staticmethod
    def save_csv(content: str, filepath: str = DEFAULT_FILENAME) -> str:
        """
        Save CSV text to disk.

        Args:
            content: The CSV text.
            filepath: Target file, or a directory to place `data.csv` in.

        Returns:
            The path that was written.
        """
        if os.path.isdir(filepath):
            filepath = os.path.join(filepath, DEFAULT_FILENAME)

        logger.info(f"Saving CSV to: {filepath}")
        try:
            with open(filepath, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.exception(f"Failed to save CSV: {e}")
            raise

        return filepath
