"""AML synthetic data generator: schema-driven records and rule-violation scenarios."""

__version__ = "0.1.0"
