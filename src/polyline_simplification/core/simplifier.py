# polyline_simplification/core/simplifier.py
"""
Batch simplification of many polylines.

This module provides the PolylineSimplifier class, which applies a
simplification strategy to batches of polylines stored as numpy arrays,
either sequentially or with a multiprocessing pool.
"""

import logging
import multiprocessing
from multiprocessing import Pool
from typing import List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from polyline_simplification.simplifiers import SimplifierStrategy
from polyline_simplification.utils import distribute_work, to_array, to_points

# Configure module logger
logger = logging.getLogger(__name__)


class PolylineSimplifier:
    """
    Applies a simplification strategy to batches of polylines.

    Each polyline is an array of shape (num_vertices, 2). Polylines are
    independent, so large batches are split into contiguous ranges and
    simplified in worker processes.
    """

    def __init__(
            self,
            strategy: SimplifierStrategy,
            parallel_threshold: int = 1000,
            num_processes: Optional[int] = None
    ) -> None:
        """
        Initialize the batch simplifier.

        Args:
            strategy: The simplification strategy to use.
            parallel_threshold: Batches with more polylines than this are
                processed in parallel.
            num_processes: Number of processes for parallel processing.
                If None, uses CPU count - 1.
        """
        self.strategy = strategy
        self.parallel_threshold = parallel_threshold
        self.num_processes = num_processes or max(1, multiprocessing.cpu_count() - 1)

    def simplify(self, polyline: np.ndarray) -> np.ndarray:
        """
        Simplify a single polyline.

        Args:
            polyline: Array of vertices with shape [vertices, 2].

        Returns:
            np.ndarray: Retained vertices with shape [retained, 2].

        Raises:
            ValueError: If the input shape is invalid.
        """
        return to_array(self.strategy.scan(to_points(polyline)))

    def process(self, polylines: Sequence[np.ndarray]) -> List[np.ndarray]:
        """
        Simplify a batch of polylines, in parallel for large batches.

        Args:
            polylines: Polylines, each with shape [vertices, 2].

        Returns:
            List[np.ndarray]: Simplified polylines, in input order.
        """
        num_polylines = len(polylines)

        if num_polylines > self.parallel_threshold and self.num_processes > 1:
            logger.info(f"Using parallel processing for {num_polylines} polylines")
            return self._process_in_parallel(polylines)

        logger.info(f"Using sequential processing for {num_polylines} polylines")
        return [
            self.simplify(polyline)
            for polyline in tqdm(polylines, desc=self.strategy.name, disable=num_polylines < 2)
        ]

    def _process_in_parallel(self, polylines: Sequence[np.ndarray]) -> List[np.ndarray]:
        """
        Simplify polylines with a multiprocessing pool.

        Args:
            polylines: Polylines to simplify.

        Returns:
            List[np.ndarray]: Simplified polylines, in input order.
        """
        distribution = distribute_work(len(polylines), self.num_processes)

        batch_data = [
            (list(polylines[start:end]), start)
            for start, end in distribution
        ]

        with Pool(processes=self.num_processes) as pool:
            batch_results = list(pool.map(self._worker_simplify, batch_data))

        # Restore input order
        batch_results.sort(key=lambda x: x[0])

        result: List[np.ndarray] = []
        for _, simplified in batch_results:
            result.extend(simplified)

        return result

    def _worker_simplify(
            self,
            batch_data: Tuple[List[np.ndarray], int]
    ) -> Tuple[int, List[np.ndarray]]:
        """
        Worker function for parallel processing.

        Args:
            batch_data: Tuple containing:
                - Polylines to process
                - Starting index within the full batch

        Returns:
            Tuple containing:
                - Starting index
                - Simplified polylines
        """
        polylines, start_idx = batch_data
        return start_idx, [self.simplify(polyline) for polyline in polylines]
