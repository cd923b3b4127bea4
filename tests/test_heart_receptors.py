import pytest

from exersomes.heart.receptors import (
    ADIPONECTIN,
    AT1_RECEPTOR,
    BETA_ADRENERGIC,
    IGF1R,
    NPRA,
    TLR4,
    CardiacReceptor,
    ReceptorExerciseResponse,
    calculate_receptor_response,
    get_exercise_responsive_receptors,
    get_receptors_by_cardiac_condition,
)


def test_responsive_receptors_order():
    assert get_exercise_responsive_receptors() == [
        BETA_ADRENERGIC, AT1_RECEPTOR, IGF1R, NPRA, ADIPONECTIN, TLR4,
    ]


@pytest.mark.parametrize("receptor", [BETA_ADRENERGIC, IGF1R, NPRA, ADIPONECTIN, TLR4, AT1_RECEPTOR])
def test_zero_weeks_no_change_without_modifiers(receptor):
    assert calculate_receptor_response(receptor, "Aerobic", 70, 0) == (1.0, 1.0)


def test_beta_adrenergic_floor_and_hiit():
    expression, sensitivity = calculate_receptor_response(BETA_ADRENERGIC, "Aerobic", 70, 120)
    assert expression == pytest.approx(0.7)
    hiit_expression, hiit_sensitivity = calculate_receptor_response(BETA_ADRENERGIC, "HIIT", 70, 120)
    assert hiit_expression / expression == pytest.approx(0.9)
    assert hiit_sensitivity / sensitivity == pytest.approx(1.1)


def test_at1_endurance_stronger_than_resistance():
    endurance = calculate_receptor_response(AT1_RECEPTOR, "HIIT", 70, 12)
    resistance = calculate_receptor_response(AT1_RECEPTOR, "Resistance", 70, 12)
    assert endurance[0] < resistance[0] < 1.0
    assert endurance[1] < resistance[1] < 1.0


def test_at1_clamped_at_zero():
    assert calculate_receptor_response(AT1_RECEPTOR, "Aerobic", 70, 120) == (0.0, 0.0)


def test_igf1r_resistance_bonus():
    aerobic = calculate_receptor_response(IGF1R, "Aerobic", 70, 12)
    resistance = calculate_receptor_response(IGF1R, "Resistance", 70, 12)
    assert resistance[0] / aerobic[0] == pytest.approx(1.2)
    assert resistance[1] / aerobic[1] == pytest.approx(1.1)


def test_upregulated_receptors_increase():
    for receptor in (NPRA, ADIPONECTIN):
        expression, sensitivity = calculate_receptor_response(receptor, "Aerobic", 70, 12)
        assert expression > 1.0 and sensitivity > 1.0


def test_tlr4_floor_and_sensitivity_clamp():
    expression, sensitivity = calculate_receptor_response(TLR4, "Aerobic", 70, 120)
    assert expression == pytest.approx(0.6)
    assert sensitivity == 0.0


def test_unknown_receptor_unchanged():
    other = CardiacReceptor(
        name="Other",
        type="",
        cell_types=[],
        ligands=[],
        signaling_pathways=[],
        expression_level="Low",
        function="",
        exercise_response=ReceptorExerciseResponse("Up", "Increased", "Acute"),
    )
    assert calculate_receptor_response(other, "HIIT", 90, 24) == (1.0, 1.0)


@pytest.mark.parametrize(
    "condition, expected",
    [
        ("Heart Failure", [BETA_ADRENERGIC, AT1_RECEPTOR, NPRA, ADIPONECTIN]),
        ("Hypertension", [AT1_RECEPTOR, NPRA]),
        ("Coronary Artery Disease", [ADIPONECTIN, TLR4]),
        ("Physiological Hypertrophy", [IGF1R, NPRA]),
    ],
)
def test_receptors_by_condition(condition, expected):
    assert get_receptors_by_cardiac_condition(condition) == expected


def test_receptors_by_unknown_condition_returns_all():
    assert get_receptors_by_cardiac_condition("Unknown") == get_exercise_responsive_receptors()