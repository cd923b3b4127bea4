"""Cardiac receptors and how exercise training changes them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReceptorExerciseResponse:
    """Direction of expression and sensitivity changes with exercise."""

    expression: str  # "Up", "Down", "No change"
    sensitivity: str  # "Increased", "Decreased", "No change"
    time_to_effect: str  # "Acute", "Chronic", "Both"


@dataclass(frozen=True)
class CardiacReceptor:
    """A receptor expressed in cardiac tissue."""

    name: str
    type: str
    cell_types: tuple[str, ...]
    ligands: tuple[str, ...]
    signaling_pathways: tuple[str, ...]
    expression_level: str  # "High", "Medium", "Low"
    function: str
    exercise_response: ReceptorExerciseResponse

    def __post_init__(self) -> None:
        for name in ("cell_types", "ligands", "signaling_pathways"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


BETA_ADRENERGIC = CardiacReceptor(
    name="β-Adrenergic Receptor",
    type="G-protein coupled receptor",
    cell_types=("Cardiomyocytes", "Nodal cells", "Coronary vessels"),
    ligands=("Epinephrine", "Norepinephrine", "Isoproterenol"),
    signaling_pathways=("cAMP/PKA", "CaMKII", "β-arrestin"),
    expression_level="High",
    function="Chronotropy, inotropy, lusitropy, coronary dilation",
    exercise_response=ReceptorExerciseResponse("Down", "Increased", "Chronic"),
)

AT1_RECEPTOR = CardiacReceptor(
    name="Angiotensin II Receptor Type 1",
    type="G-protein coupled receptor",
    cell_types=("Cardiomyocytes", "Fibroblasts", "Vascular smooth muscle"),
    ligands=("Angiotensin II",),
    signaling_pathways=("Gq/PLC", "JAK/STAT", "MAPK", "ROS pathways"),
    expression_level="Medium",
    function="Vasoconstriction, hypertrophy, fibrosis, ROS production",
    exercise_response=ReceptorExerciseResponse("Down", "Decreased", "Chronic"),
)

IGF1R = CardiacReceptor(
    name="IGF-1 Receptor",
    type="Receptor tyrosine kinase",
    cell_types=("Cardiomyocytes", "Endothelial cells"),
    ligands=("IGF-1", "Insulin (weak)"),
    signaling_pathways=("PI3K/Akt", "MAPK/ERK", "JAK/STAT"),
    expression_level="Medium",
    function="Physiological hypertrophy, anti-apoptosis, contractility",
    exercise_response=ReceptorExerciseResponse("Up", "Increased", "Chronic"),
)

NPRA = CardiacReceptor(
    name="Natriuretic Peptide Receptor A",
    type="Guanylyl cyclase receptor",
    cell_types=("Cardiomyocytes", "Fibroblasts", "Vascular cells"),
    ligands=("ANP", "BNP"),
    signaling_pathways=("cGMP/PKG", "Phosphodiesterases"),
    expression_level="Medium",
    function="Anti-hypertrophy, anti-fibrotic, lusitropy",
    exercise_response=ReceptorExerciseResponse("Up", "Increased", "Both"),
)

ADIPONECTIN = CardiacReceptor(
    name="Adiponectin Receptor 1",
    type="Seven-transmembrane receptor",
    cell_types=("Cardiomyocytes", "Endothelial cells"),
    ligands=("Adiponectin",),
    signaling_pathways=("AMPK", "PPARα", "Ceramidase"),
    expression_level="Medium",
    function="Energy metabolism, anti-apoptosis, anti-inflammatory",
    exercise_response=ReceptorExerciseResponse("Up", "Increased", "Chronic"),
)

TLR4 = CardiacReceptor(
    name="Toll-Like Receptor 4",
    type="Pattern recognition receptor",
    cell_types=("Cardiomyocytes", "Macrophages", "Fibroblasts"),
    ligands=("LPS", "DAMPs", "Saturated fatty acids"),
    signaling_pathways=("MyD88", "TRIF", "NF-κB", "IRF3"),
    expression_level="Low",
    function="Innate immunity, inflammation, cell death signaling",
    exercise_response=ReceptorExerciseResponse("Down", "Decreased", "Chronic"),
)

_RECEPTORS_BY_CONDITION: dict[str, tuple[CardiacReceptor, ...]] = {
    "Heart Failure": (BETA_ADRENERGIC, AT1_RECEPTOR, NPRA, ADIPONECTIN),
    "Hypertension": (AT1_RECEPTOR, NPRA),
    "Coronary Artery Disease": (ADIPONECTIN, TLR4),
    "Physiological Hypertrophy": (IGF1R, NPRA),
}


def get_exercise_responsive_receptors() -> list[CardiacReceptor]:
    """Cardiac receptors that respond to exercise."""
    return [BETA_ADRENERGIC, AT1_RECEPTOR, IGF1R, NPRA, ADIPONECTIN, TLR4]


def calculate_receptor_response(
    receptor: CardiacReceptor, exercise_type: str, intensity_percent: int, weeks: int
) -> tuple[float, float]:
    """Fold changes of (expression, sensitivity) after weeks of training."""
    duration = weeks / 12.0
    expression = 1.0
    sensitivity = 1.0

    if receptor.name == BETA_ADRENERGIC.name:
        expression = max(1.0 - 0.2 * duration, 0.7)
        sensitivity = 1.0 + 0.15 * duration
        if exercise_type == "HIIT":
            expression *= 0.9
            sensitivity *= 1.1
    elif receptor.name == AT1_RECEPTOR.name:
        if exercise_type in ("Aerobic", "HIIT"):
            expression = 1.0 - 0.25 * duration
            sensitivity = 1.0 - 0.15 * duration
        else:
            expression = 1.0 - 0.1 * duration
            sensitivity = 1.0 - 0.05 * duration
    elif receptor.name == IGF1R.name:
        expression = 1.0 + 0.2 * duration
        sensitivity = 1.0 + 0.15 * duration
        if exercise_type == "Resistance":
            expression *= 1.2
            sensitivity *= 1.1
    elif receptor.name == NPRA.name:
        expression = 1.0 + 0.3 * duration
        sensitivity = 1.0 + 0.2 * duration
    elif receptor.name == ADIPONECTIN.name:
        expression = 1.0 + 0.25 * duration
        sensitivity = 1.0 + 0.2 * duration
    elif receptor.name == TLR4.name:
        expression = max(1.0 - 0.3 * duration, 0.6)
        sensitivity = 1.0 - 0.2 * duration

    return max(expression, 0.0), max(sensitivity, 0.0)


def get_receptors_by_cardiac_condition(condition: str) -> list[CardiacReceptor]:
    """Receptors relevant to a heart condition; all responsive receptors otherwise."""
    receptors = _RECEPTORS_BY_CONDITION.get(condition)
    if receptors is None:
        return get_exercise_responsive_receptors()
    return list(receptors)