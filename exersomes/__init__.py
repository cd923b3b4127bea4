"""Rule-based models of exercise-induced signalling in bone, blood, heart and immune organs."""

__version__ = "0.1.0"