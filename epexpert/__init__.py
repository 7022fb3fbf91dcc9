"""EP-Expert: pulmonary embolism diagnostic and treatment decision support."""

__version__ = "0.1.0"
