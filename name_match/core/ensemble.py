"""Weighted ensembles of name matchers."""

from typing import List, Optional, Sequence
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from multiprocessing import Pool, cpu_count
from functools import partial
import logging
import time
import numpy as np
import pandas as pd

from name_match.core.matcher import BaseMatcher, construct_matcher
from name_match.config.models import EnsembleConfig, EnsembleResult, MatchResult


class Ensemble:
    """
    Combines several matchers into a single weighted score.

    The aggregate score is the plain sum of the weighted scores. It is not
    normalized, so it only stays within [0, 1] when the weights sum to 1, for
    instance after calling set_equal_weight().
    """

    def __init__(
        self,
        matchers: Sequence[BaseMatcher],
        worker_processes: int = -1,
        use_processes: bool = False,
        min_parallel_batch: int = 100
    ):
        """
        Initialize the ensemble.

        Args:
            matchers: Ordered matchers to combine
            worker_processes: Number of workers for batch scoring (-1 for CPU count)
            use_processes: Use a process pool instead of threads for batches
            min_parallel_batch: Smallest batch that is scored in parallel
        """
        self.matchers: List[BaseMatcher] = list(matchers)
        self.worker_processes = worker_processes if worker_processes > 0 else cpu_count()
        self.use_processes = use_processes
        self.min_parallel_batch = min_parallel_batch

        self._initialize_logging()

    @classmethod
    def from_config(cls, config: EnsembleConfig) -> 'Ensemble':
        """
        Build an ensemble from its declarative configuration.

        Args:
            config: Ensemble configuration

        Returns:
            Ensemble: Ensemble with matchers created through the registry

        Raises:
            ValueError: If a matcher kind is unknown or does not take the
                given options
        """
        matchers = [
            construct_matcher(spec.kind, config=spec.options, weight=spec.weight)
            for spec in config.matchers
        ]

        ensemble = cls(
            matchers,
            worker_processes=config.worker_processes,
            use_processes=config.use_processes,
            min_parallel_batch=config.min_parallel_batch
        )
        if config.equal_weight:
            ensemble.set_equal_weight()
        return ensemble

    def _initialize_logging(self) -> None:
        """Setup logging configuration."""
        self.logger = logging.getLogger(__name__)
        if not self.logger.hasHandlers():
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter(
                    '%(asctime)s - %(levelname)s - %(message)s'
                )
            )
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def set_equal_weight(self) -> None:
        """Give every matcher the same weight so the weights sum to 1."""
        if not self.matchers:
            return

        weight = 1.0 / len(self.matchers)
        for matcher in self.matchers:
            matcher.weight = weight

    def aggregate_score(self, name1: str, name2: str) -> float:
        """Sum of the weighted scores of all matchers."""
        return sum(
            matcher.weighted_score(name1, name2)
            for matcher in self.matchers
        )

    def match_results(self, name1: str, name2: str) -> List[MatchResult]:
        """Per matcher results, in matcher order."""
        return [matcher.result(name1, name2) for matcher in self.matchers]

    def ensemble_result(self, name1: str, name2: str) -> EnsembleResult:
        """
        Score two names with every matcher.

        Args:
            name1: First name
            name2: Second name

        Returns:
            EnsembleResult: Aggregate score and the per matcher results
        """
        results = self.match_results(name1, name2)
        return EnsembleResult(
            name1=name1,
            name2=name2,
            score=sum(result.weighted_score for result in results),
            results=results
        )

    def _process_chunk(self, query: str, chunk: List[str]) -> List[EnsembleResult]:
        """Score a query against a chunk of candidates."""
        return [self.ensemble_result(query, candidate) for candidate in chunk]

    def batch(self, query: str, candidates: Sequence[str]) -> List[EnsembleResult]:
        """
        Score a query name against many candidates.

        Large batches are split into contiguous chunks that are scored in
        parallel. Matcher weights must not change while a batch is running.

        Args:
            query: Name to compare
            candidates: Names to compare the query against

        Returns:
            List[EnsembleResult]: One result per candidate, in candidate order
        """
        candidates = list(candidates)
        if len(candidates) < self.min_parallel_batch or self.worker_processes == 1:
            return self._process_chunk(query, candidates)

        start_time = time.time()

        chunks = [
            [candidates[i] for i in indices]
            for indices in np.array_split(np.arange(len(candidates)), self.worker_processes)
            if len(indices)
        ]
        self.logger.debug(
            f"Scoring {len(candidates)} candidates in {len(chunks)} chunks "
            f"using {'processes' if self.use_processes else 'threads'}"
        )

        process_chunk = partial(self._process_chunk, query)
        if self.use_processes:
            with Pool(processes=self.worker_processes) as pool:
                chunk_results = pool.map(process_chunk, chunks)
        else:
            with ThreadPoolExecutor(max_workers=self.worker_processes) as executor:
                chunk_results = list(executor.map(process_chunk, chunks))

        results = [result for chunk in chunk_results for result in chunk]

        self.logger.info(
            f"Batch scoring of {len(candidates)} candidates completed in "
            f"{time.time() - start_time:.2f} seconds"
        )
        return results

    def rank(
        self,
        query: str,
        candidates: Sequence[str],
        min_score: float = 0.0,
        limit: Optional[int] = None
    ) -> List[EnsembleResult]:
        """
        Rank candidates by their aggregate score against a query.

        Args:
            query: Name to compare
            candidates: Names to compare the query against
            min_score: Minimum aggregate score to keep a candidate
            limit: Maximum number of results to return

        Returns:
            List[EnsembleResult]: Results sorted by descending score, ties
            kept in candidate order
        """
        ranked = sorted(
            (result for result in self.batch(query, candidates) if result.score >= min_score),
            key=lambda result: result.score,
            reverse=True
        )
        return ranked if limit is None else ranked[:limit]


def results_to_frame(results: Sequence[EnsembleResult]) -> pd.DataFrame:
    """
    Flatten ensemble results into a DataFrame.

    Args:
        results: Ensemble results, typically from Ensemble.batch()

    Returns:
        pd.DataFrame: One row per result with name1, name2 and score columns
        plus ``<algorithm>_score`` and ``<algorithm>_weighted`` per matcher.
        An algorithm used by several matchers is suffixed with the matcher
        position, e.g. ``Jaro-Winkler_0_score`` and ``Jaro-Winkler_1_score``
    """
    records = []
    for result in results:
        record = {
            'name1': result.name1,
            'name2': result.name2,
            'score': result.score
        }
        counts = Counter(match.algorithm for match in result.results)
        for position, match in enumerate(result.results):
            prefix = match.algorithm
            if counts[prefix] > 1:
                prefix = f'{prefix}_{position}'
            record[f'{prefix}_score'] = match.absolute_score
            record[f'{prefix}_weighted'] = match.weighted_score
        records.append(record)

    return pd.DataFrame(records, columns=None if records else ['name1', 'name2', 'score'])
