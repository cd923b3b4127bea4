"""Circulating immune cells and bloodstream-targeted exercise prescriptions."""