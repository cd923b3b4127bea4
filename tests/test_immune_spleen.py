import dataclasses

import pytest

from exersomes.immune.spleen import (
    BAFF,
    CCL19,
    TNF_SPLENIC,
    calculate_contractile_response,
    calculate_leukocyte_redistribution,
    predict_splenic_factor_response,
)


def test_baseline_and_unknown_time_points():
    assert calculate_contractile_response(90, 60, "Baseline") == 1.0
    assert calculate_contractile_response(90, 60, "Tomorrow") == calculate_contractile_response(
        10, 5, "Baseline"
    )


def test_contraction_recovers_over_time():
    points = ["During exercise", "Immediate post", "30min post", "60min post", "Baseline"]
    volumes = [calculate_contractile_response(80, 30, p) for p in points]
    assert volumes == sorted(volumes)
    assert len(set(volumes)) == len(volumes)


def test_longer_exercise_contracts_more():
    short = calculate_contractile_response(80, 30, "During exercise")
    long = calculate_contractile_response(80, 31, "During exercise")
    assert long < short


def test_duration_only_matters_during_exercise():
    assert calculate_contractile_response(80, 90, "Immediate post") == calculate_contractile_response(
        80, 10, "Immediate post"
    )


def test_higher_intensity_contracts_more():
    assert calculate_contractile_response(90, 20, "30min post") < calculate_contractile_response(
        50, 20, "30min post"
    )


def test_redistribution_keys_and_no_contraction():
    result = calculate_leukocyte_redistribution(1.0)
    assert set(result) == {"NK cells", "Monocytes", "B cells", "T cells", "Neutrophils"}
    assert len(set(result.values())) == 1


def test_redistribution_ordering():
    volume = calculate_contractile_response(100, 60, "During exercise")
    result = calculate_leukocyte_redistribution(volume)
    assert result["NK cells"] > result["Monocytes"] > result["T cells"] > result["B cells"]
    assert result["B cells"] == result["Neutrophils"]
    baseline = calculate_leukocyte_redistribution(1.0)
    assert all(result[k] > baseline[k] for k in result)


def test_ccl19_training_increases():
    assert predict_splenic_factor_response(CCL19, 70, 12) > predict_splenic_factor_response(CCL19, 70, 0)


def test_baff_training_increases():
    assert predict_splenic_factor_response(BAFF, 70, 24) > predict_splenic_factor_response(BAFF, 70, 12)


def test_acute_intensity_raises_all_factors():
    for factor in (CCL19, TNF_SPLENIC, BAFF):
        assert predict_splenic_factor_response(factor, 90, 0) > predict_splenic_factor_response(factor, 40, 0)


def test_unknown_factor_unchanged():
    other = dataclasses.replace(CCL19, name="Other")
    assert predict_splenic_factor_response(other, 90, 20) == predict_splenic_factor_response(other, 10, 0)


def test_response_is_keyed_by_name_not_data():
    renamed = dataclasses.replace(BAFF, name="Other")
    assert renamed.baseline_concentration == BAFF.baseline_concentration
    assert renamed.post_exercise_concentration.maximum > renamed.baseline_concentration.maximum
    assert TNF_SPLENIC.baseline_concentration.unit == "pg/mg tissue"
    assert predict_splenic_factor_response(renamed, 80, 24) == 1.0
    assert predict_splenic_factor_response(BAFF, 80, 24) > 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        BAFF.name = "Other"