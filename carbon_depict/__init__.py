"""Carbon Depict calculation core: derived ESG compliance metrics for stored records."""

__version__ = "0.1.0"
