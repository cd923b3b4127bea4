# exersomes

Simple, rule-based models of how exercise changes the body's signalling
molecules and immune cells. The package covers bone, blood, the heart and the
immune organs (spleen and thymus). It holds catalogues of ligands, receptors,
osteokines, cytokines, cardiokines, splenic and thymic factors and circulating
immune cells. It also provides functions that estimate how each of these
responds to an exercise session or a training programme.

All values come from fixed heuristics. They are meant for exploration and
teaching, not for clinical decisions.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Layout

| Module | What it holds |
| --- | --- |
| `exersomes.bone.signaling` | `Ligand`, `Receptor` and `BoneOsteokine` records, with the `LIGANDS`, `RECEPTORS` and `OSTEOKINES` catalogues |
| `exersomes.bone.prescriptions` | Bone-targeted `ExercisePrescription`s, `predict_bone_response`, `get_exercise_duration`, `calculate_time_to_effect` |
| `exersomes.immune.cytokines` | `Cytokine` records with `calculate_acute_response` and `calculate_chronic_adaptation` |
| `exersomes.immune.spleen` | `SplenicFactor` records, spleen contraction and leukocyte redistribution |
| `exersomes.immune.thymus` | `ThymicFactor` records, thymic size and T cell diversity with age and training |
| `exersomes.immune.prescription` | Immune-targeted prescriptions, `predict_immune_response`, cytokine timing, tissue effects and the inflammation curve |
| `exersomes.bloodstream.immune_cells` | `ImmuneCell` records, cell-count time series and immune indexes |
| `exersomes.bloodstream.prescription` | Bloodstream-targeted prescriptions and `predict_circulatory_response` |
| `exersomes.heart.cardiokines` | `Cardiokine` records and their response to exercise |
| `exersomes.heart.receptors` | `CardiacReceptor` records and their expression and sensitivity changes |

All records are frozen dataclasses; their list fields are stored as tuples.

## Examples

Choose a bone protocol for a condition and predict the response after 12 weeks:

```python
from exersomes.bone.prescriptions import (
    get_prescription_by_condition,
    predict_bone_response,
    get_exercise_duration,
)

protocol = get_prescription_by_condition("Osteopenia")[0]
response = predict_bone_response(protocol, 12, True, False)
print(response.structural_metrics["Bone mineral density"])
print(get_exercise_duration(protocol, 68, "Moderate"))
```

Estimate the acute cytokine response to a session:

```python
from exersomes.immune.cytokines import (
    get_acutely_upregulated_cytokines,
    calculate_acute_response,
)

for cytokine in get_acutely_upregulated_cytokines():
    print(cytokine.name, calculate_acute_response(cytokine, 75, 60, "Trained"))
```

Build a time series of circulating immune cells across exercise and recovery
(times in minutes; at least two time points are needed, otherwise
`ValueError` is raised):

```python
from exersomes.bloodstream.immune_cells import predict_immune_cell_timeseries_for_exercise

series = predict_immune_cell_timeseries_for_exercise(80.0, 45.0, 180.0, 10)
print(series["Neutrophils"])
```

Predict cardiokine levels and receptor adaptations:

```python
from exersomes.heart.cardiokines import predict_cardiokine_response
from exersomes.heart.receptors import (
    get_receptors_by_cardiac_condition,
    calculate_receptor_response,
)

print(predict_cardiokine_response("Aerobic", 70, 45, 12, False))
for receptor in get_receptors_by_cardiac_condition("Heart Failure"):
    expression, sensitivity = calculate_receptor_response(receptor, "Aerobic", 70, 12)
    print(receptor.name, expression, sensitivity)
```

Explore the spleen, the thymus and the immune tissues:

```python
from exersomes.immune.spleen import (
    calculate_contractile_response,
    calculate_leukocyte_redistribution,
)
from exersomes.immune.thymus import predict_thymic_size, predict_t_cell_diversity
from exersomes.immune.prescription import tissue_effects, calculate_exercise_inflammation_curve

volume = calculate_contractile_response(80, 45, "During exercise")
print(calculate_leukocyte_redistribution(volume))
print(predict_thymic_size(50, 24, 70, 90), predict_t_cell_diversity(65, 12, 4))
print(tissue_effects("Spleen", "HIIT", 6))
print(calculate_exercise_inflammation_curve()["Moderate"])
```

## Conventions

- Lookup functions fall back to fixed defaults. An unknown bone condition
  returns the Bone Mineral Density Protocol, an unknown circulatory condition
  the Endothelial Health Protocol, an unknown immune condition the Immune
  Enhancement Protocol, and an unknown heart condition all exercise-responsive
  receptors. Unknown cytokines or tissues give empty dictionaries.
- Response factors are centred on `1.0`, which means no change. The metric
  dictionaries of `BoneResponse` and `CirculatoryResponse` hold percentage
  changes, where negative values are reductions; `ImmuneResponse` holds fold
  changes and relative scores.
- Categorical inputs are plain strings such as `"Aerobic"`, `"HIIT"`,
  `"Resistance"`, `"Moderate"`, `"Severe"` or `"Acute"`, matched exactly.

## What the package does not do

- It has no command-line program; it is a library to import.
- It does not retrieve, store or analyse gene or protein data, and it draws
  no plots.
- It does not model circulating hormones and metabolites (such as
  catecholamines, cortisol or lactate) or lymph node factors.