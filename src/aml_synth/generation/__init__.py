"""Schema-driven record generation: locale data, field values, resolver."""

from aml_synth.generation.context import GenerationContext
from aml_synth.generation.fields import FieldValueGenerator
from aml_synth.generation.locales import LocaleProvider
from aml_synth.generation.probabilities import MatchStrategy, Probabilities, random_sources
from aml_synth.generation.resolver import SchemaResolver

__all__ = [
    "FieldValueGenerator",
    "GenerationContext",
    "LocaleProvider",
    "MatchStrategy",
    "Probabilities",
    "SchemaResolver",
    "random_sources",
]
