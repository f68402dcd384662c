"""YAML specimen configuration parsing."""

from .specimen_yaml_parser import SpecimenYAMLParser

__all__ = [
    "SpecimenYAMLParser"
]
