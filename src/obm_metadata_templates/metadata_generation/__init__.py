"""Metadata generation exports."""

from .generation_contracts import GeneratedTemplates
from .metadata_template_use_case import generate_obm_metadata

__all__ = ["GeneratedTemplates", "generate_obm_metadata"]
