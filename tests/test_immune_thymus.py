import pytest

from exersomes.immune.cytokines import ValueRange
from exersomes.immune.thymus import (
    IL7_THYMIC,
    KGF,
    THYMULIN,
    ThymicFactor,
    calculate_thymic_response,
    predict_t_cell_diversity,
    predict_thymic_size,
)


def _other_factor():
    return ThymicFactor(
        name="Unknown factor",
        type="Cytokine",
        source_cells=["A"],
        target_cells=["B"],
        exercise_regulation="Up",
        primary_effects=["C"],
        thymic_function="none",
        aging_effect="none",
        baseline_concentration=ValueRange(1.0, 2.0, "pg/mL"),
        post_exercise_concentration=ValueRange(1.0, 2.0, "pg/mL"),
    )


def test_lists_become_tuples():
    factor = _other_factor()
    assert factor.source_cells == ("A",)
    assert factor.primary_effects == ("C",)


def test_unknown_factor_has_no_change():
    assert calculate_thymic_response(_other_factor(), 70, 50, 20) == 1.0


def test_thymulin_young_untrained_optimal():
    assert calculate_thymic_response(THYMULIN, 60, 20, 0) == pytest.approx(1.3)


def test_optimal_range_is_flat():
    low = calculate_thymic_response(THYMULIN, 50, 30, 10)
    high = calculate_thymic_response(THYMULIN, 80, 30, 10)
    assert low == pytest.approx(high)


def test_high_intensity_is_worse_than_optimal():
    optimal = calculate_thymic_response(THYMULIN, 70, 30, 10)
    extreme = calculate_thymic_response(THYMULIN, 100, 30, 10)
    assert extreme < optimal


def test_age_factor_floor():
    young = calculate_thymic_response(IL7_THYMIC, 60, 20, 8)
    very_old = calculate_thymic_response(IL7_THYMIC, 60, 200, 8)
    assert very_old / young == pytest.approx(0.3)


def test_training_increases_kgf():
    untrained = calculate_thymic_response(KGF, 60, 40, 0)
    trained = calculate_thymic_response(KGF, 60, 40, 12)
    assert trained > untrained


def test_thymic_size_age_breakpoints():
    assert predict_thymic_size(20, 0, 70, 100) == pytest.approx(1.0)
    assert predict_thymic_size(40, 0, 70, 100) == pytest.approx(0.7)
    assert predict_thymic_size(60, 0, 70, 100) == pytest.approx(0.5)
    assert predict_thymic_size(200, 0, 70, 100) == pytest.approx(0.2)


def test_thymic_size_training_helps():
    assert predict_thymic_size(50, 24, 70, 100) > predict_thymic_size(50, 0, 70, 100)


def test_thymic_size_excess_intensity_penalised():
    moderate = predict_thymic_size(50, 24, 84, 100)
    excessive = predict_thymic_size(50, 24, 100, 100)
    assert excessive < moderate


def test_thymic_size_benefit_capped():
    assert predict_thymic_size(30, 1000, 70, 100) == pytest.approx(
        predict_thymic_size(30, 2000, 70, 100)
    )


def test_t_cell_diversity_age_breakpoints():
    assert predict_t_cell_diversity(30, 0, 3) == pytest.approx(1.0)
    assert predict_t_cell_diversity(60, 0, 3) == pytest.approx(0.7)
    assert predict_t_cell_diversity(200, 0, 3) == pytest.approx(0.3)


def test_t_cell_diversity_capped_for_older_adults():
    assert predict_t_cell_diversity(65, 40, 7) == pytest.approx(0.9)


def test_t_cell_diversity_exercise_helps_and_frequency_capped():
    base = predict_t_cell_diversity(45, 0, 3)
    assert predict_t_cell_diversity(45, 5, 3) > base
    assert predict_t_cell_diversity(45, 5, 6) == pytest.approx(predict_t_cell_diversity(45, 5, 7))