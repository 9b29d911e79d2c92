"""
Tests for the Elo formula functions.
"""

import pytest

from elo_engine.core.elo_rating import (
    expected_score,
    mirror_result,
    transform_rating,
    update_rating,
    validate_k_factor,
    validate_result,
)


def test_transform_rating():
    """Test the logistic strength transform."""
    assert transform_rating(0) == 1.0
    assert transform_rating(400) == pytest.approx(10.0)
    assert transform_rating(800) == pytest.approx(100.0)

    # A 400 point gap is a 10:1 strength ratio
    assert transform_rating(1400) / transform_rating(1000) == pytest.approx(10.0)


def test_expected_score():
    """Test the expected_score function."""
    # Equal ratings should give 0.5
    r = transform_rating(1500)
    assert expected_score(r, r) == 0.5

    # Higher rating should give higher expected score
    assert expected_score(transform_rating(1600), transform_rating(1500)) > 0.5
    assert expected_score(transform_rating(1500), transform_rating(1600)) < 0.5

    # 400 points ahead means 10 to 1
    assert expected_score(transform_rating(1400), transform_rating(1000)) == pytest.approx(10 / 11)


def test_expected_scores_are_complementary():
    """Home and opponent expectations add up to one."""
    home_r = transform_rating(1613)
    opponent_r = transform_rating(1388)
    total = expected_score(home_r, opponent_r) + expected_score(opponent_r, home_r)
    assert total == pytest.approx(1.0)


def test_update_rating():
    """Test the update_rating function."""
    # No change if actual equals expected
    assert update_rating(1500, 0.5, 0.5, k_factor=32) == 1500

    assert update_rating(1500, 0.5, 1.0, k_factor=32) == 1516
    assert update_rating(1500, 0.5, 0.0, k_factor=32) == 1484

    # Default K-factor is 32
    assert update_rating(1500, 0.5, 1.0) == 1516


def test_mirror_result():
    """The opponent sees the mirrored result."""
    assert mirror_result(1.0) == 0.0
    assert mirror_result(0.0) == 1.0
    assert mirror_result(0.5) == 0.5
    assert mirror_result(0.3) == pytest.approx(0.7)


@pytest.mark.parametrize("result", [0, 0.0, 0.5, 1, 1.0])
def test_validate_result_accepts_range(result):
    assert validate_result(result) == result


@pytest.mark.parametrize("result", [-0.1, 1.1, float("nan"), float("inf")])
def test_validate_result_rejects_out_of_range(result):
    with pytest.raises(ValueError, match="match result must be between 0 and 1"):
        validate_result(result)


def test_validate_result_rejects_non_numbers():
    with pytest.raises(TypeError, match="match result must be a number"):
        validate_result("win")


def test_validate_k_factor():
    """Zero and negative factors are allowed, non-finite ones are not."""
    assert validate_k_factor(32) == 32
    assert validate_k_factor(0) == 0
    assert validate_k_factor(-16.5) == -16.5

    with pytest.raises(ValueError, match="k_factor must be a finite number"):
        validate_k_factor(float("nan"))
    with pytest.raises(ValueError, match="k_factor must be a finite number"):
        validate_k_factor(float("-inf"))
    with pytest.raises(TypeError, match="k_factor must be a number"):
        validate_k_factor("32")
    with pytest.raises(TypeError, match="k_factor must be a number"):
        validate_k_factor(True)
