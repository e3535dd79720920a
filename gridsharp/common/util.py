from collections import Counter
from typing import Iterable, List


def face_frequencies(rolls: Iterable[int], faces: int) -> List[int]:
    """
    Count how often each face of a die came up.

    :param rolls: The observed roll values, each in ``[1, faces]``
    :param faces: Number of faces on the die
    :return: A list where index ``i`` holds the count for face ``i + 1``
    :raises ValueError: If a roll falls outside ``[1, faces]``
    """
    counts = Counter(rolls)
    out_of_range = [value for value in counts if not 1 <= value <= faces]
    if out_of_range:
        raise ValueError(f"Rolls outside 1..{faces}: {sorted(out_of_range)}")
    return [counts.get(face, 0) for face in range(1, faces + 1)]


def calculate_chi_square(
    observed_values: List[float], expected_values: List[float]
) -> float:
    """
    Calculate the chi-square statistic for observed against expected counts.

    :param observed_values: A list of observed counts
    :param expected_values: A list of expected counts
    :return: The chi-square statistic
    :raises ValueError: If the two lists differ in length
    """
    if len(observed_values) != len(expected_values):
        raise ValueError("Observed and expected value lists must have the same length.")

    return sum((o - e) ** 2 / e for o, e in zip(observed_values, expected_values))


def uniform_chi_square(rolls: List[int], faces: int) -> float:
    """Chi-square statistic of a roll sample against a fair die."""
    observed = face_frequencies(rolls, faces)
    expected = [len(rolls) / faces] * faces
    return calculate_chi_square(observed, expected)
