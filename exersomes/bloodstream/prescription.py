"""Bloodstream-targeted exercise prescriptions and circulatory response predictions."""

from __future__ import annotations

from dataclasses import dataclass, field

from exersomes.bone.prescriptions import TimeToEffect


@dataclass(frozen=True)
class ExercisePrescription:
    """Parameters for a bloodstream-targeted exercise protocol."""

    name: str
    description: str
    primary_type: str  # "Aerobic", "HIIT", "Resistance", "Combined"
    intensity_percent: int  # % of max HR, VO2max or 1RM
    duration_minutes: int
    frequency_per_week: int
    target_circ_factors: tuple[str, ...] = ()
    target_cells: tuple[str, ...] = ()
    expected_benefits: tuple[str, ...] = ()
    hemodynamic_effects: tuple[str, ...] = ()
    indications_for: tuple[str, ...] = ()
    contraindications: tuple[str, ...] = ()
    time_to_effect: TimeToEffect = TimeToEffect(acute="", chronic="")

    def __post_init__(self) -> None:
        for name in (
            "target_circ_factors",
            "target_cells",
            "expected_benefits",
            "hemodynamic_effects",
            "indications_for",
            "contraindications",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))


@dataclass
class CirculatoryResponse:
    """Predicted percentage changes in bloodstream parameters."""

    factor_changes: dict[str, float] = field(default_factory=dict)
    cell_changes: dict[str, float] = field(default_factory=dict)
    flow_metrics: dict[str, float] = field(default_factory=dict)
    coagulation_metrics: dict[str, float] = field(default_factory=dict)
    inflammation_metrics: dict[str, float] = field(default_factory=dict)


ENDOTHELIAL_HEALTH = ExercisePrescription(
    name="Endothelial Health Protocol",
    description="Moderate intensity continuous training to improve endothelial function",
    primary_type="Aerobic",
    intensity_percent=65,
    duration_minutes=45,
    frequency_per_week=4,
    target_circ_factors=("Nitric Oxide", "VEGF", "ET-1", "Prostacyclin"),
    target_cells=("Endothelial Cells", "EPCs"),
    expected_benefits=(
        "Improved flow-mediated dilation",
        "Enhanced nitric oxide bioavailability",
        "Reduced endothelial inflammation",
        "Increased capillarization",
    ),
    hemodynamic_effects=(
        "Reduced peripheral resistance",
        "Improved microvascular perfusion",
        "Enhanced vasodilatory capacity",
    ),
    indications_for=(
        "Hypertension",
        "Early atherosclerosis",
        "Endothelial dysfunction",
        "Microvascular disease",
    ),
    contraindications=(
        "Severe aortic stenosis",
        "Hypertrophic cardiomyopathy with outflow obstruction",
        "Acute vascular injury",
    ),
    time_to_effect=TimeToEffect(
        acute="Flow improvements within 1-3 hours",
        chronic="Structural adaptation in 4-8 weeks",
    ),
)

INFLAMMATION_REDUCTION = ExercisePrescription(
    name="Vascular Inflammation Reduction",
    description="Low-to-moderate intensity exercise to reduce systemic inflammation",
    primary_type="Aerobic",
    intensity_percent=55,
    duration_minutes=40,
    frequency_per_week=5,
    target_circ_factors=("IL-6", "IL-10", "CRP", "TNF-α", "IL-1Ra"),
    target_cells=("Monocytes", "T-cells", "Neutrophils"),
    expected_benefits=(
        "Reduced inflammatory cytokines",
        "Shift toward anti-inflammatory phenotype",
        "Decreased vascular inflammation markers",
        "Improved metabolic profile",
    ),
    hemodynamic_effects=(
        "Reduced arterial stiffness",
        "Improved endothelial function",
    ),
    indications_for=(
        "Chronic low-grade inflammation",
        "Metabolic syndrome",
        "Atherosclerosis",
        "Autoimmune conditions",
    ),
    contraindications=(
        "Acute inflammatory flare",
        "Febrile illness",
        "Recent surgery",
    ),
    time_to_effect=TimeToEffect(
        acute="Minor changes within 1-2 hours",
        chronic="Significant reduction in 6-12 weeks",
    ),
)

ANTICOAGULATION_PROTOCOL = ExercisePrescription(
    name="Coagulation Profile Improvement",
    description="Moderate-intensity exercise designed to optimize coagulation balance",
    primary_type="Combined",
    intensity_percent=60,
    duration_minutes=35,
    frequency_per_week=4,
    target_circ_factors=("Fibrinogen", "D-dimer", "PAI-1", "tPA"),
    target_cells=("Platelets", "Endothelial Cells"),
    expected_benefits=(
        "Increased fibrinolytic activity",
        "Reduced platelet aggregation",
        "Balanced coagulation profile",
        "Decreased thrombotic risk",
    ),
    hemodynamic_effects=(
        "Improved blood fluidity",
        "Reduced abnormal clotting tendency",
    ),
    indications_for=(
        "Hypercoagulable states",
        "Sedentary lifestyle",
        "Post-thrombotic syndrome",
        "Metabolic syndrome",
    ),
    contraindications=(
        "Acute bleeding",
        "Severe thrombocytopenia",
        "Recent pulmonary embolism",
        "Unstable cardiovascular disease",
    ),
    time_to_effect=TimeToEffect(
        acute="Changes in coagulation profile within 2-4 hours",
        chronic="Stable improvements in 4-8 weeks",
    ),
)

CIRCULATING_PROGENITOR_STIMULATION = ExercisePrescription(
    name="Progenitor Cell Mobilization",
    description="Interval-based protocol to maximize mobilization of circulating progenitor cells",
    primary_type="HIIT",
    intensity_percent=85,
    duration_minutes=30,
    frequency_per_week=3,
    target_circ_factors=("VEGF", "G-CSF", "SDF-1", "NO"),
    target_cells=("EPCs", "CD34+ Cells", "HSCs"),
    expected_benefits=(
        "Increased circulating progenitor cells",
        "Enhanced vascular repair capacity",
        "Improved angiogenic potential",
        "Regeneration of damaged endothelium",
    ),
    hemodynamic_effects=(
        "Increased peripheral blood flow",
        "Enhanced tissue perfusion during recovery",
    ),
    indications_for=(
        "Vascular repair needs",
        "Post-infarction recovery",
        "Peripheral arterial disease",
        "Diabetic vascular disease",
    ),
    contraindications=(
        "Bone marrow suppression",
        "Recent stem cell transplantation",
        "Hematological malignancies",
        "Severe cardiopulmonary disease",
    ),
    time_to_effect=TimeToEffect(
        acute="Peak mobilization at 10-30 minutes post-exercise",
        chronic="Sustained increases after 4 weeks",
    ),
)

_PRESCRIPTIONS_BY_CONDITION: dict[str, tuple[ExercisePrescription, ...]] = {
    "Atherosclerosis": (ENDOTHELIAL_HEALTH, INFLAMMATION_REDUCTION),
    "Hypertension": (ENDOTHELIAL_HEALTH,),
    "Thrombosis Risk": (ANTICOAGULATION_PROTOCOL,),
    "Vascular Repair": (CIRCULATING_PROGENITOR_STIMULATION,),
    "Metabolic Syndrome": (INFLAMMATION_REDUCTION, ENDOTHELIAL_HEALTH),
}

# (endothelial, inflammation, coagulation, progenitor) coefficients per protocol
_EFFECT_COEFFICIENTS: dict[str, tuple[float, float, float, float]] = {
    "Endothelial Health Protocol": (0.4, 0.2, 0.1, 0.1),
    "Vascular Inflammation Reduction": (0.2, 0.5, 0.2, 0.1),
    "Coagulation Profile Improvement": (0.2, 0.2, 0.5, 0.1),
    "Progenitor Cell Mobilization": (0.3, 0.1, 0.1, 0.6),
}

_BASELINE_WEEKS = {
    "Endothelial function": 4.0,
    "Inflammation reduction": 6.0,
    "Coagulation profile": 5.0,
    "Progenitor cell count": 3.0,
}


def get_prescription_by_condition(condition: str) -> list[ExercisePrescription]:
    """Return the prescriptions suited to a circulatory condition."""
    return list(_PRESCRIPTIONS_BY_CONDITION.get(condition, (ENDOTHELIAL_HEALTH,)))


def _duration_factor(weeks: int) -> float:
    # Diminishing returns after 8 weeks
    if weeks <= 8:
        return weeks / 8.0
    return 1.0 + 0.1 * (weeks - 8) / 8.0


def predict_circulatory_response(
    prescription: ExercisePrescription,
    weeks: int,
    baseline_inflammation: bool,
    endothelial_dysfunction: bool,
) -> CirculatoryResponse:
    """Estimate bloodstream parameter changes after following a prescription for some weeks."""
    intensity = prescription.intensity_percent / 100.0
    scale = intensity * _duration_factor(weeks)
    coefficients = _EFFECT_COEFFICIENTS.get(prescription.name, (0.0, 0.0, 0.0, 0.0))
    endothelial, inflammation, coagulation, progenitor = (c * scale for c in coefficients)

    # Pathological baselines respond more strongly
    if endothelial_dysfunction:
        endothelial *= 1.5
    if baseline_inflammation:
        inflammation *= 1.5

    return CirculatoryResponse(
        factor_changes={
            "Nitric Oxide": 15.0 + 40.0 * endothelial,
            "VEGF": 10.0 + 30.0 * endothelial + 40.0 * progenitor,
            "ET-1": -5.0 - 20.0 * endothelial,
            "Prostacyclin": 10.0 + 20.0 * endothelial,
            "IL-6 (acute)": 50.0 + 100.0 * intensity,
            "IL-6 (chronic)": -10.0 - 20.0 * inflammation,
            "CRP": -5.0 - 25.0 * inflammation,
            "TNF-α": -5.0 - 20.0 * inflammation,
            "IL-10": 10.0 + 30.0 * inflammation,
            "IL-1Ra": 15.0 + 35.0 * inflammation,
            "Fibrinogen": -5.0 - 15.0 * coagulation,
            "D-dimer (acute)": 10.0 + 20.0 * intensity,
            "D-dimer (chronic)": -5.0 - 10.0 * coagulation,
            "PAI-1": -10.0 - 30.0 * coagulation,
            "tPA": 15.0 + 25.0 * coagulation,
            "SDF-1": 20.0 + 40.0 * progenitor,
            "G-CSF": 15.0 + 35.0 * progenitor,
        },
        cell_changes={
            "EPCs": 50.0 + 150.0 * progenitor,
            "CD34+ Cells": 30.0 + 120.0 * progenitor,
            "Monocytes (anti-inflammatory)": 10.0 + 30.0 * inflammation,
            "Regulatory T-cells": 5.0 + 20.0 * inflammation,
            "Neutrophil ROS production": -10.0 - 30.0 * inflammation,
            "Platelet aggregation": -5.0 - 25.0 * coagulation,
        },
        flow_metrics={
            "Flow-mediated dilation": 5.0 + 25.0 * endothelial,
            "Arterial compliance": 3.0 + 17.0 * endothelial,
            "Pulse wave velocity": -2.0 - 13.0 * endothelial,
            "Reactive hyperemia index": 5.0 + 20.0 * endothelial,
        },
        coagulation_metrics={
            "Clotting time": 3.0 + 10.0 * coagulation,
            "Platelet aggregation threshold": 5.0 + 15.0 * coagulation,
            "Fibrinolytic capacity": 10.0 + 30.0 * coagulation,
            "Clot lysis time": -5.0 - 15.0 * coagulation,
        },
        inflammation_metrics={
            "Systemic inflammation score": -5.0 - 25.0 * inflammation,
            "Endothelial activation markers": -5.0 - 20.0 * endothelial,
            "Oxidative stress markers": -5.0 - 15.0 * (endothelial + inflammation) / 2,
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
        duration = max(int(duration * 0.7), 20)
    return duration


def calculate_time_to_effect(
    prescription: ExercisePrescription, benefit_target: str, benefit_magnitude: float
) -> float:
    """Estimated weeks to reach a given percentage improvement in a circulatory benefit."""
    baseline_weeks = _BASELINE_WEEKS.get(benefit_target, 8.0)
    intensity_factor = prescription.intensity_percent / 70.0
    frequency_factor = prescription.frequency_per_week / 3.0
    magnitude_factor = benefit_magnitude / 25.0

    adjusted = baseline_weeks * magnitude_factor / (intensity_factor * frequency_factor)
    return max(adjusted, 1.0)