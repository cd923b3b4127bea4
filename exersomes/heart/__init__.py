"""Cardiokines and cardiac receptors that respond to exercise."""