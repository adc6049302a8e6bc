"""CareerLens backend: onboarding goal validation, skill assessment and role deep dives."""

__version__ = "1.0.0"
