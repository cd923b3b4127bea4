import pytest

from exersomes.bloodstream.immune_cells import (
    MONOCYTES,
    NEUTROPHILS,
    calculate_immune_response,
    get_immune_cells_affected_by_exercise,
    predict_immune_cell_timeseries_for_exercise,
    predict_immune_indexes,
)


def test_cell_list_order():
    names = [cell.name for cell in get_immune_cells_affected_by_exercise()]
    assert names == [
        "Neutrophils",
        "Monocytes",
        "Natural Killer Cells",
        "CD4+ T Helper Cells",
        "CD8+ Cytotoxic T Cells",
        "B Lymphocytes",
    ]


@pytest.mark.parametrize("cell", get_immune_cells_affected_by_exercise())
def test_start_equals_baseline(cell):
    assert calculate_immune_response(cell, 70, 60, 0) == pytest.approx(cell.baseline_count.mean)


@pytest.mark.parametrize("cell", get_immune_cells_affected_by_exercise())
def test_full_recovery_returns_baseline(cell):
    late = 60 + 30 + cell.exercise_response.recovery_time * 60 + 1
    assert calculate_immune_response(cell, 70, 60, late) == cell.baseline_count.mean


def test_neutrophils_rise_after_exercise():
    end = calculate_immune_response(NEUTROPHILS, 80, 45, 45)
    early = calculate_immune_response(NEUTROPHILS, 80, 45, 55)
    assert early - end == pytest.approx(0.5 * NEUTROPHILS.baseline_count.mean)


def test_other_cells_plateau_after_exercise():
    end = calculate_immune_response(MONOCYTES, 80, 45, 45)
    early = calculate_immune_response(MONOCYTES, 80, 45, 70)
    assert early == pytest.approx(end)


def test_response_factor_is_capped():
    peak_60 = calculate_immune_response(MONOCYTES, 100, 60, 60)
    peak_180 = calculate_immune_response(MONOCYTES, 100, 180, 180)
    assert peak_60 == pytest.approx(peak_180)


def test_recovery_declines_monotonically():
    values = [calculate_immune_response(MONOCYTES, 70, 60, t) for t in (95, 150, 200, 300)]
    assert values == sorted(values, reverse=True)


def test_timeseries_shape_and_ends():
    series = predict_immune_cell_timeseries_for_exercise(70, 60, 600, 12)
    cells = get_immune_cells_affected_by_exercise()
    assert set(series) == {cell.name for cell in cells}
    for cell in cells:
        values = series[cell.name]
        assert len(values) == 12
        assert values[0] == pytest.approx(cell.baseline_count.mean)
        assert values[-1] == pytest.approx(cell.baseline_count.mean)


def test_timeseries_rejects_too_few_points():
    with pytest.raises(ValueError):
        predict_immune_cell_timeseries_for_exercise(70, 60, 60, 1)


def test_indexes_keys():
    assert set(predict_immune_indexes(70, 60, "Moderately trained")) == {
        "Neutrophil:Lymphocyte Ratio",
        "Immune Vigilance",
        "Inflammation Resolution",
    }


def test_unknown_status_matches_moderate():
    assert predict_immune_indexes(70, 60, "Unknown") == pytest.approx(
        predict_immune_indexes(70, 60, "Moderately trained")
    )


def test_training_lowers_nlr():
    untrained = predict_immune_indexes(70, 60, "Untrained")["Neutrophil:Lymphocyte Ratio"]
    trained = predict_immune_indexes(70, 60, "Highly trained")["Neutrophil:Lymphocyte Ratio"]
    assert trained < untrained


def test_prolonged_exercise_reduces_vigilance():
    short = predict_immune_indexes(70, 60, "Moderately trained")["Immune Vigilance"]
    long = predict_immune_indexes(70, 180, "Moderately trained")["Immune Vigilance"]
    assert long < short


def test_short_high_intensity_resolution():
    indexes = predict_immune_indexes(90, 30, "Moderately trained")
    assert indexes["Inflammation Resolution"] == pytest.approx(120.0)


def test_prolonged_high_intensity_impairs_resolution():
    indexes = predict_immune_indexes(90, 120, "Moderately trained")
    assert indexes["Inflammation Resolution"] < 100.0