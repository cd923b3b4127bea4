"""Bone-targeted exercise prescriptions and response predictions."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TimeToEffect:
    """Expected timing of acute and chronic effects."""

    acute: str
    chronic: str


@dataclass(frozen=True)
class ExercisePrescription:
    """Parameters for a bone-targeted exercise protocol."""

    name: str
    description: str
    primary_type: str  # "Resistance", "Impact", "Combined", "Plyometric"
    intensity_percent: int
    load_magnitude: str  # "Low", "Moderate", "High", "Variable"
    duration_minutes: int
    frequency_per_week: int
    target_osteokines: tuple[str, ...] = ()
    target_cells: tuple[str, ...] = ()
    expected_benefits: tuple[str, ...] = ()
    mechanical_effects: tuple[str, ...] = ()
    indications_for: tuple[str, ...] = ()
    contraindications: tuple[str, ...] = ()
    time_to_effect: TimeToEffect = TimeToEffect(acute="", chronic="")

    def __post_init__(self) -> None:
        for name in (
            "target_osteokines",
            "target_cells",
            "expected_benefits",
            "mechanical_effects",
            "indications_for",
            "contraindications",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))


@dataclass
class BoneResponse:
    """Predicted percentage changes in bone parameters."""

    osteokine_changes: dict[str, float] = field(default_factory=dict)
    cell_activity_changes: dict[str, float] = field(default_factory=dict)
    structural_metrics: dict[str, float] = field(default_factory=dict)
    formation_metrics: dict[str, float] = field(default_factory=dict)
    resorption_metrics: dict[str, float] = field(default_factory=dict)


BONE_MINERAL_DENSITY = ExercisePrescription(
    name="Bone Mineral Density Protocol",
    description="Progressive resistance training to enhance bone mineral density",
    primary_type="Resistance",
    intensity_percent=75,
    load_magnitude="Moderate",
    duration_minutes=40,
    frequency_per_week=3,
    target_osteokines=("Osteocalcin", "Sclerostin", "Osteopontin", "RANKL/OPG"),
    target_cells=("Osteoblasts", "Osteocytes"),
    expected_benefits=(
        "Increased bone mineral density",
        "Enhanced bone microarchitecture",
        "Improved bone strength",
        "Reduced fracture risk",
    ),
    mechanical_effects=(
        "Increased bone strain",
        "Enhanced mechanotransduction",
        "Improved bone cross-sectional area",
    ),
    indications_for=(
        "Osteopenia",
        "Osteoporosis",
        "Age-related bone loss",
        "Disuse osteoporosis",
    ),
    contraindications=(
        "Recent fracture",
        "Severe osteoporosis with vertebral fractures",
        "Acute bone metastases",
    ),
    time_to_effect=TimeToEffect(
        acute="Osteokine changes within 0.5-2 hours",
        chronic="Structural changes in 3-6 months",
    ),
)

OSTEOCYTE_ACTIVATION = ExercisePrescription(
    name="Osteocyte Network Stimulation",
    description="Impact exercise protocol to activate osteocyte networks",
    primary_type="Impact",
    intensity_percent=65,
    load_magnitude="Variable",
    duration_minutes=30,
    frequency_per_week=4,
    target_osteokines=("Sclerostin", "FGF23", "PGE2", "DKK1", "DMP1"),
    target_cells=("Osteocytes", "Bone Lining Cells"),
    expected_benefits=(
        "Enhanced mechanosensing",
        "Improved osteocyte viability",
        "Optimized bone remodeling",
        "Enhanced bone material properties",
    ),
    mechanical_effects=(
        "Fluid flow in lacuno-canalicular network",
        "Dynamic strain patterns",
        "Enhanced bone interstitial fluid movement",
    ),
    indications_for=(
        "Age-related osteocyte dysfunction",
        "Impaired mechanotransduction",
        "Disuse-related bone loss",
        "Early osteoporosis",
    ),
    contraindications=(
        "Severe arthritis",
        "Acute joint inflammation",
        "Recent lower extremity fracture",
    ),
    time_to_effect=TimeToEffect(
        acute="Signaling changes within 0.5-1 hour",
        chronic="Network improvements in 6-12 weeks",
    ),
)

BONE_REMODELING = ExercisePrescription(
    name="Bone Remodeling Optimization",
    description="Combined loading protocol to optimize bone turnover",
    primary_type="Combined",
    intensity_percent=70,
    load_magnitude="Moderate",
    duration_minutes=45,
    frequency_per_week=3,
    target_osteokines=("RANKL", "OPG", "Osteocalcin", "TGF-β"),
    target_cells=("Osteoblasts", "Osteoclasts", "Osteocytes"),
    expected_benefits=(
        "Balanced bone remodeling",
        "Enhanced bone quality",
        "Improved mineralization",
        "Optimized collagen matrix",
    ),
    mechanical_effects=(
        "Targeted microdamage repair",
        "Enhanced bone material properties",
        "Improved microarchitecture",
    ),
    indications_for=(
        "Dysregulated bone turnover",
        "Metabolic bone diseases",
        "Secondary osteoporosis",
        "Recovery from immobilization",
    ),
    contraindications=(
        "Paget's disease (active phase)",
        "High-turnover bone disorders",
        "Recent bisphosphonate treatment",
    ),
    time_to_effect=TimeToEffect(
        acute="Turnover marker changes within 24-48 hours",
        chronic="Remodeling optimization in 3-4 months",
    ),
)

BONE_ANABOLISM = ExercisePrescription(
    name="Osteogenic Loading Protocol",
    description="High-intensity, brief loading to maximize bone formation",
    primary_type="Plyometric",
    intensity_percent=85,
    load_magnitude="High",
    duration_minutes=20,
    frequency_per_week=2,
    target_osteokines=("IGF-1", "BMP-2", "Wnt ligands", "Osteocalcin"),
    target_cells=("Osteoprogenitors", "Osteoblasts", "MSCs"),
    expected_benefits=(
        "Stimulated bone formation",
        "Recruited osteoprogenitors",
        "Enhanced periosteal expansion",
        "Improved bone geometry",
    ),
    mechanical_effects=(
        "High strain rates",
        "Peak compressive forces",
        "Enhanced mechanotransduction",
    ),
    indications_for=(
        "Stable osteopenia",
        "Athletic bone strengthening",
        "Post-fracture recovery phase",
        "Spaceflight-induced bone loss",
    ),
    contraindications=(
        "Unstable fractures",
        "Severe osteoporosis",
        "Joint instability",
        "Balance disorders",
    ),
    time_to_effect=TimeToEffect(
        acute="Anabolic signaling within 1-6 hours",
        chronic="Measurable formation in 6-8 weeks",
    ),
)

_PRESCRIPTIONS_BY_CONDITION: dict[str, tuple[ExercisePrescription, ...]] = {
    "Osteopenia": (BONE_MINERAL_DENSITY, OSTEOCYTE_ACTIVATION),
    "Osteoporosis": (BONE_MINERAL_DENSITY,),
    "Disuse Osteoporosis": (OSTEOCYTE_ACTIVATION, BONE_REMODELING),
    "Athletic Performance": (BONE_ANABOLISM,),
    "Metabolic Bone Disease": (BONE_REMODELING,),
}

_LOAD_FACTORS = {"Low": 0.6, "Moderate": 0.8, "High": 1.0, "Variable": 0.85}

# (formation, resorption, mineralization, architecture) coefficients per protocol
_EFFECT_COEFFICIENTS: dict[str, tuple[float, float, float, float]] = {
    "Bone Mineral Density Protocol": (0.4, -0.2, 0.4, 0.3),
    "Osteocyte Network Stimulation": (0.3, -0.1, 0.2, 0.4),
    "Bone Remodeling Optimization": (0.3, -0.3, 0.3, 0.3),
    "Osteogenic Loading Protocol": (0.5, -0.1, 0.3, 0.4),
}

_BASELINE_WEEKS = {
    "Bone formation markers": 6.0,
    "Bone mineral density": 16.0,
    "Trabecular architecture": 12.0,
    "Cortical thickness": 20.0,
}


def get_prescription_by_condition(condition: str) -> list[ExercisePrescription]:
    """Return the prescriptions suited to a bone condition."""
    return list(_PRESCRIPTIONS_BY_CONDITION.get(condition, (BONE_MINERAL_DENSITY,)))


def _duration_factor(weeks: int) -> float:
    # Diminishing returns after 16 weeks for bone
    if weeks <= 16:
        return weeks / 16.0
    return 1.0 + 0.1 * (weeks - 16) / 16.0


def predict_bone_response(
    prescription: ExercisePrescription,
    weeks: int,
    low_baseline_density: bool,
    high_resorption: bool,
) -> BoneResponse:
    """Estimate bone parameter changes after following a prescription for some weeks."""
    scale = (
        prescription.intensity_percent / 100.0
        * _LOAD_FACTORS.get(prescription.load_magnitude, 0.0)
        * _duration_factor(weeks)
    )
    coefficients = _EFFECT_COEFFICIENTS.get(prescription.name, (0.0, 0.0, 0.0, 0.0))
    formation, resorption, mineralization, architecture = (c * scale for c in coefficients)

    if low_baseline_density:
        formation *= 1.3
        mineralization *= 1.2
    if high_resorption:
        resorption *= 1.5

    return BoneResponse(
        osteokine_changes={
            "Osteocalcin": 15.0 + 40.0 * formation,
            "Sclerostin": -10.0 - 30.0 * formation,
            "Osteopontin": 10.0 + 25.0 * architecture,
            "RANKL": -5.0 - 20.0 * resorption,
            "OPG": 10.0 + 30.0 * formation,
            "IGF-1 (local)": 15.0 + 35.0 * formation,
            "TGF-β": 5.0 + 20.0 * architecture,
            "FGF23": -5.0 - 15.0 * mineralization,
        },
        cell_activity_changes={
            "Osteoblast activity": 20.0 + 60.0 * formation,
            "Osteoclast activity": -5.0 - 25.0 * resorption,
            "Osteocyte viability": 10.0 + 30.0 * architecture,
            "MSC recruitment": 15.0 + 45.0 * formation,
            "Osteocyte mechanosensitivity": 10.0 + 40.0 * architecture,
        },
        structural_metrics={
            "Bone mineral density": 0.5 + 3.0 * mineralization,
            "Trabecular number": 0.5 + 2.5 * architecture,
            "Trabecular thickness": 0.3 + 2.0 * architecture,
            "Cortical thickness": 0.2 + 1.5 * mineralization,
            "Bone volume fraction": 0.5 + 2.5 * architecture,
        },
        formation_metrics={
            "P1NP": 10.0 + 40.0 * formation,
            "Bone-specific ALP": 5.0 + 30.0 * formation,
            "Osteoid surface": 5.0 + 25.0 * formation,
            "Mineralizing surface": 5.0 + 20.0 * mineralization,
        },
        resorption_metrics={
            "CTX": -5.0 - 20.0 * resorption,
            "NTX": -5.0 - 20.0 * resorption,
            "TRAP5b": -3.0 - 15.0 * resorption,
            "Erosion depth": -2.0 - 10.0 * resorption,
        },
    )


def get_exercise_duration(
    prescription: ExercisePrescription, age_years: int, condition_severity: str
) -> int:
    """Recommended session length in minutes for the patient's age and severity."""
    duration = prescription.duration_minutes
    if age_years > 60:
        duration = int(duration * 0.9)
    if age_years > 75:
        duration = int(duration * 0.85)

    if condition_severity == "Moderate":
        duration = int(duration * 0.9)
    elif condition_severity == "Severe":
        duration = max(int(duration * 0.75), 15)
    return duration


def calculate_time_to_effect(
    prescription: ExercisePrescription, benefit_target: str, benefit_magnitude: float
) -> float:
    """Estimated weeks to reach a given percentage improvement in a bone benefit."""
    baseline_weeks = _BASELINE_WEEKS.get(benefit_target, 12.0)
    intensity_factor = prescription.intensity_percent / 70.0
    frequency_factor = prescription.frequency_per_week / 3.0
    magnitude_factor = benefit_magnitude / 20.0

    adjusted = baseline_weeks * magnitude_factor / (intensity_factor * frequency_factor)
    return max(adjusted, 4.0)