"""
Answer sets with known outcomes, in question order.
"""

EPDS_ALL_ZERO = [0] * 10
EPDS_ALL_MAX = [3] * 10
EPDS_MODERATE = [1, 1, 2, 1, 1, 1, 2, 1, 1, 0]  # 11, Moderate Risk
EPDS_SELF_HARM_ONLY = [0, 0, 0, 0, 0, 0, 0, 0, 0, 1]  # 1, Low Risk but flagged

PHQ9_ALL_ZERO = [0] * 9
PHQ9_MILD = [1, 1, 1, 1, 1, 1, 0, 0, 0]  # 6, Mild
PHQ9_SEVERE = [3, 3, 3, 3, 3, 3, 2, 2, 0]  # 22, Severe


def as_mapping(values: list[int]) -> dict[int, int]:
    return {question_id: value for question_id, value in enumerate(values, start=1)}
