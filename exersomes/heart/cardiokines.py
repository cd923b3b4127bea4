"""Cardiokines secreted by cardiac tissue and their response to exercise."""

from __future__ import annotations

from dataclasses import dataclass

from exersomes.immune.cytokines import ValueRange


@dataclass(frozen=True)
class Cardiokine:
    """A signaling molecule secreted from cardiac tissue."""

    name: str
    molecular_weight: float  # kDa
    source_cells: tuple[str, ...]
    target_organs: tuple[str, ...]
    exercise_regulation: str  # "Up", "Down", "Biphasic"
    temporal_pattern: str  # "Acute", "Chronic", "Both"
    primary_effects: tuple[str, ...]
    cardiac_effect: str
    baseline_range: ValueRange

    def __post_init__(self) -> None:
        for name in ("source_cells", "target_organs", "primary_effects"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


NATRIURETIC_PEPTIDES = Cardiokine(
    name="Natriuretic Peptides (ANP/BNP)",
    molecular_weight=3.5,
    source_cells=("Cardiomyocytes", "Atrial cells"),
    target_organs=("Kidney", "Vasculature", "Adipose", "Brain"),
    exercise_regulation="Up",
    temporal_pattern="Both",
    primary_effects=("Natriuresis", "Vasodilation", "Lipolysis", "Anti-fibrotic"),
    cardiac_effect="Reduced cardiac load, anti-hypertrophic",
    baseline_range=ValueRange(5.0, 100.0, "pg/mL"),
)

FGF23 = Cardiokine(
    name="Fibroblast Growth Factor 23",
    molecular_weight=32.0,
    source_cells=("Cardiomyocytes", "Fibroblasts"),
    target_organs=("Kidney", "Parathyroid", "Heart"),
    exercise_regulation="Up",
    temporal_pattern="Acute",
    primary_effects=("Phosphate regulation", "Vitamin D metabolism", "Calcium homeostasis"),
    cardiac_effect="Hypertrophy (chronic elevation)",
    baseline_range=ValueRange(40.0, 100.0, "pg/mL"),
)

GDF15 = Cardiokine(
    name="Growth Differentiation Factor 15",
    molecular_weight=35.0,
    source_cells=("Cardiomyocytes", "Macrophages"),
    target_organs=("Heart", "Brain", "Adipose", "Muscle"),
    exercise_regulation="Biphasic",
    temporal_pattern="Both",
    primary_effects=("Anti-inflammatory", "Anti-hypertrophic", "Metabolic regulation"),
    cardiac_effect="Cardioprotective, anti-remodeling",
    baseline_range=ValueRange(200.0, 1200.0, "pg/mL"),
)

FOLLISTATIN3 = Cardiokine(
    name="Follistatin-like 3",
    molecular_weight=27.0,
    source_cells=("Cardiomyocytes",),
    target_organs=("Heart", "Vasculature"),
    exercise_regulation="Down",
    temporal_pattern="Chronic",
    primary_effects=("TGF-β pathway modulation", "Metabolic regulation"),
    cardiac_effect="Anti-hypertrophic",
    baseline_range=ValueRange(1.0, 5.0, "ng/mL"),
)

ADROPIN = Cardiokine(
    name="Adropin",
    molecular_weight=4.5,
    source_cells=("Cardiomyocytes", "Endothelial cells"),
    target_organs=("Endothelium", "Liver", "Brain"),
    exercise_regulation="Up",
    temporal_pattern="Both",
    primary_effects=("Endothelial function", "Energy homeostasis", "Insulin sensitivity"),
    cardiac_effect="Improved endothelial function, anti-atherogenic",
    baseline_range=ValueRange(1.0, 5.0, "ng/mL"),
)

CTRP9 = Cardiokine(
    name="C1q/TNF-related protein 9",
    molecular_weight=40.0,
    source_cells=("Cardiomyocytes", "Epicardial adipocytes"),
    target_organs=("Heart", "Vasculature"),
    exercise_regulation="Up",
    temporal_pattern="Chronic",
    primary_effects=("Glucose metabolism", "Fatty acid oxidation", "Anti-inflammatory"),
    cardiac_effect="Cardioprotective, anti-apoptotic",
    baseline_range=ValueRange(5.0, 40.0, "ng/mL"),
)

# Baseline multipliers seen in people with heart disease
_HEART_DISEASE_BASELINE = {
    NATRIURETIC_PEPTIDES.name: 2.5,
    GDF15.name: 1.8,
    FOLLISTATIN3.name: 1.4,
    CTRP9.name: 0.7,
}


def get_exercise_upregulated_cardiokines() -> list[Cardiokine]:
    """Cardiokines that rise with exercise."""
    return [NATRIURETIC_PEPTIDES, FGF23, ADROPIN, CTRP9]


def get_exercise_downregulated_cardiokines() -> list[Cardiokine]:
    """Cardiokines that fall with exercise."""
    return [FOLLISTATIN3]


def calculate_exercise_response(
    cardiokine: Cardiokine,
    exercise_type: str,
    intensity_percent: int,
    duration_minutes: int,
    training_weeks: int,
) -> float:
    """Fold change of a cardiokine for an exercise session and training history."""
    intensity = intensity_percent / 100.0
    duration = duration_minutes / 60.0
    weeks = training_weeks / 12.0

    if cardiokine.name == NATRIURETIC_PEPTIDES.name:
        change = (1.0 + 0.8 * intensity * duration) * (1.0 + 0.2 * weeks)
        # Cardio exercise has a greater effect
        if exercise_type in ("HIIT", "Aerobic"):
            change *= 1.2
        return change
    if cardiokine.name == FGF23.name:
        gain = 0.4 if intensity_percent > 70 else 0.1
        return 1.0 + gain * intensity * duration
    if cardiokine.name == GDF15.name:
        # Acute response dominates early, chronic adaptation later
        if training_weeks < 2:
            return 1.0 + 0.5 * intensity * duration
        return 1.0 - 0.2 * weeks
    if cardiokine.name == FOLLISTATIN3.name:
        if training_weeks > 4:
            return max(1.0 - 0.15 * weeks, 0.7)
        return 1.0
    if cardiokine.name == ADROPIN.name:
        if exercise_type == "Aerobic":
            return (1.0 + 0.3 * duration) * (1.0 + 0.3 * weeks)
        return (1.0 + 0.1 * duration) * (1.0 + 0.2 * weeks)
    if cardiokine.name == CTRP9.name:
        return 1.0 + 0.3 * weeks
    return 1.0


def predict_cardiokine_response(
    exercise_type: str,
    intensity_percent: int,
    duration_minutes: int,
    training_weeks: int,
    has_heart_disease: bool,
) -> dict[str, float]:
    """Predicted cardiokine levels after an exercise protocol, keyed by name."""
    responses: dict[str, float] = {}
    cardiokines = get_exercise_upregulated_cardiokines() + get_exercise_downregulated_cardiokines()
    for cardiokine in cardiokines:
        baseline = (cardiokine.baseline_range.minimum + cardiokine.baseline_range.maximum) / 2.0
        if has_heart_disease:
            baseline *= _HEART_DISEASE_BASELINE.get(cardiokine.name, 1.0)
        responses[cardiokine.name] = baseline * calculate_exercise_response(
            cardiokine, exercise_type, intensity_percent, duration_minutes, training_weeks
        )
    return responses