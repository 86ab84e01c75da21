"""Transaction gateway: a thin proxy in front of the Astra DB REST API"""

__version__ = "1.0.0"
