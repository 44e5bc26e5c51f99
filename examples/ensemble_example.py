"""Example usage of the name matching ensemble with CSV files."""

import pandas as pd
import logging
from pathlib import Path
from typing import Optional

from name_match.config.models import JaroWinklerConfig
from name_match.core.ensemble import Ensemble, results_to_frame
from name_match.core.matcher import (
    JaroWinklerMatcher,
    SoundexJaccardMatcher,
    JaccardMatcher
)


def create_name_ensemble(worker_processes: int = -1) -> Ensemble:
    """
    Create an ensemble configured for personal name matching.

    Jaro-Winkler captures spelling differences, Soundex-Jaccard captures
    phonetic similarity and Jaccard handles transposed or missing name parts.

    Args:
        worker_processes: Number of workers for batch scoring (-1 for CPU count)

    Returns:
        Ensemble: Ensemble with equal weights
    """
    ensemble = Ensemble(
        [
            JaroWinklerMatcher(
                config=JaroWinklerConfig(
                    similarity_threshold=0.7,
                    max_prefix_length=4,
                    scaling_factor=0.1
                )
            ),
            SoundexJaccardMatcher(),
            JaccardMatcher()
        ],
        worker_processes=worker_processes
    )
    ensemble.set_equal_weight()
    return ensemble


def match_names(
    query: str,
    names_file: Path,
    output_file: Optional[Path] = None,
    min_score: float = 0.5,
    column: str = 'name'
) -> pd.DataFrame:
    """
    Rank the names in a CSV file against a query name.

    Args:
        query: Name to look for
        names_file: CSV file with a column of candidate names
        output_file: Optional path for output CSV file
        min_score: Minimum aggregate score to report
        column: Column holding the candidate names

    Returns:
        pd.DataFrame: Ranked matches with per algorithm scores
    """
    ensemble = create_name_ensemble()

    logging.info(f"Reading names file: {names_file}")
    candidates = pd.read_csv(names_file, dtype=str)[column].fillna('').tolist()

    ranked = ensemble.rank(query, candidates, min_score=min_score)
    results = results_to_frame(ranked)

    logging.info(f"\nMatches for '{query}': {len(results)} of {len(candidates)}")
    for result in ranked[:10]:
        logging.info(f"- {result.name2:<30}: score={result.score:.3f}")

    if output_file:
        logging.info(f"\nSaving results to: {output_file}")
        results.to_csv(output_file, index=False)

    return results


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    ensemble = create_name_ensemble()
    for name1, name2 in [
        ("Bond Jmes", "James Sancho Bond"),
        ("John Doe", "Jon Doh"),
        ("O'Brien, Patrick", "Patrick OBrien")
    ]:
        result = ensemble.ensemble_result(name1, name2)
        logging.info(f"{name1} vs {name2}: {result.score:.3f}")
        for match in result.results:
            logging.info(
                f"  {match.algorithm:<16} {match.absolute_score:.3f} "
                f"(weighted {match.weighted_score:.3f})"
            )

    names_file = Path('data/names.csv')
    if names_file.exists():
        match_names("John Doe", names_file, output_file=Path('data/matches.csv'))
