import dataclasses

import pytest

from exersomes.immune.cytokines import (
    IL1RA,
    IL6,
    IL10,
    TGF_BETA,
    TNF,
    calculate_acute_response,
    calculate_chronic_adaptation,
    get_acutely_upregulated_cytokines,
    get_anti_inflammatory_cytokines,
    get_chronically_downregulated_cytokines,
)


def _by_name():
    return {c.name: c for c in get_acutely_upregulated_cytokines()}


def test_acutely_upregulated_order():
    names = [c.name for c in get_acutely_upregulated_cytokines()]
    assert names == [
        "Interleukin-6",
        "Tumor Necrosis Factor-α",
        "Interleukin-10",
        "Interleukin-1 Receptor Antagonist",
        "Transforming Growth Factor-β",
    ]


def test_chronically_downregulated_are_down():
    result = get_chronically_downregulated_cytokines()
    assert result == [IL6, TNF]
    assert all(c.chronic_regulation == "Down" for c in result)


def test_anti_inflammatory_subset_of_acute():
    acute = get_acutely_upregulated_cytokines()
    anti = get_anti_inflammatory_cytokines()
    assert anti == [IL10, IL1RA, TGF_BETA]
    assert all(c in acute for c in anti)


def test_concentration_data():
    cytokines = _by_name()
    il6 = cytokines["Interleukin-6"]
    il10 = cytokines["Interleukin-10"]
    tgf = cytokines["Transforming Growth Factor-β"]
    assert il6.concentration_range.baseline.unit == "pg/mL"
    assert tgf.concentration_range.trained_baseline.unit == "ng/mL"
    assert (
        il10.concentration_range.post_exercise_acute.time_hour
        > il6.concentration_range.post_exercise_acute.time_hour
    )


def test_cytokine_is_frozen():
    cytokine = get_chronically_downregulated_cytokines()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        cytokine.name = "Other"
    assert cytokine.name == "Interleukin-6"


def test_source_cells_are_tuples():
    cytokines = get_acutely_upregulated_cytokines()
    assert all(isinstance(c.source_cells, tuple) and c.source_cells for c in cytokines)
    assert "Myocytes" in _by_name()["Interleukin-6"].source_cells


@pytest.mark.parametrize("cytokine", [IL6, TNF, IL10, IL1RA])
def test_trained_blunts_acute_response(cytokine):
    untrained = calculate_acute_response(cytokine, 75, 60, "Untrained")
    trained = calculate_acute_response(cytokine, 75, 60, "Trained")
    athlete = calculate_acute_response(cytokine, 75, 60, "Athlete")
    assert trained < untrained
    assert trained == athlete


def test_tgf_beta_ignores_training_status():
    assert calculate_acute_response(TGF_BETA, 80, 60, "Athlete") == calculate_acute_response(
        TGF_BETA, 80, 60, "Untrained"
    )


def test_il6_threshold_jump():
    below = calculate_acute_response(IL6, 70, 60, "Untrained")
    above = calculate_acute_response(IL6, 71, 60, "Untrained")
    assert above - below > 0.5


def test_tnf_long_duration_raises_response():
    short = calculate_acute_response(TNF, 60, 60, "Untrained")
    long = calculate_acute_response(TNF, 60, 120, "Untrained")
    assert long > short


def test_unknown_cytokine_unchanged():
    other = dataclasses.replace(IL6, name="Unknown")
    assert calculate_acute_response(other, 90, 90, "Untrained") == 1.0
    assert calculate_chronic_adaptation(other, 12, 3, 70) == calculate_acute_response(
        other, 10, 10, "Trained"
    )


def test_zero_duration_equal_across_duration_based_cytokines():
    values = {calculate_acute_response(c, 80, 0, "Untrained") for c in (IL6, IL10, IL1RA, TGF_BETA)}
    assert len(values) == 1


def test_chronic_direction():
    assert calculate_chronic_adaptation(IL6, 12, 3, 70) < calculate_chronic_adaptation(IL6, 0, 3, 70)
    assert calculate_chronic_adaptation(IL10, 12, 3, 70) > calculate_chronic_adaptation(IL10, 0, 3, 70)
    assert calculate_chronic_adaptation(IL1RA, 12, 3, 70) > calculate_chronic_adaptation(TGF_BETA, 12, 3, 70)


def test_chronic_no_training_all_equal():
    values = {calculate_chronic_adaptation(c, 0, 3, 70) for c in get_acutely_upregulated_cytokines()}
    assert len(values) == 1


def test_chronic_floors():
    assert calculate_chronic_adaptation(IL6, 18, 7, 500) == pytest.approx(0.6)
    assert calculate_chronic_adaptation(TNF, 18, 7, 500) == pytest.approx(0.7)
    assert calculate_chronic_adaptation(IL6, 18, 7, 500) == calculate_chronic_adaptation(IL6, 18, 7, 900)


def test_chronic_duration_capped():
    assert calculate_chronic_adaptation(IL10, 18, 3, 70) == calculate_chronic_adaptation(IL10, 52, 3, 70)
    assert calculate_chronic_adaptation(IL10, 12, 3, 70) < calculate_chronic_adaptation(IL10, 18, 3, 70)