"""Cytokines, spleen and thymus factors, and immune-targeted exercise prescriptions."""