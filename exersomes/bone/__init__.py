"""Bone signalling molecules and bone-targeted exercise prescriptions."""