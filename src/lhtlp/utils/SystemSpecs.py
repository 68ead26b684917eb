"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Number of worker processes for solving independent puzzles at once.

        Each solve is single-threaded sequential squaring, so one worker
        occupies one core. The CPU count is divided by PARALLELISM_DIVISOR
        (default 2), with a minimum of 1.

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = EnvironmentManager.get_int(
            EnvironmentVariables.PARALLELISM_DIVISOR
        )
        if parallelism_divisor < 1:
            raise ValueError(
                f"PARALLELISM_DIVISOR must be at least 1, got {parallelism_divisor}"
            )
        return multiprocessing.cpu_count() // parallelism_divisor or 1 # default to 1 if only 1 core available
