"""OpenBioMaps metadata template generator."""

from .metadata_generation import GeneratedTemplates, generate_obm_metadata

__all__ = ["GeneratedTemplates", "generate_obm_metadata"]
