"""Stochastic simulation of reaction networks: rule notation, vessels, a simulator, models and output helpers."""

__version__ = "1.0.0"