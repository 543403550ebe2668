"""Schema variants for proposal extraction."""

from typing import Dict, List

from ..exceptions import UnknownSchemaVariant
from .base import BaseProposalSchema, LIST_SHAPE, NARRATIVE_SHAPE
from .narrative_proposal import NarrativeProposal, NarrativeProposalSchema
from .sales_proposal import SalesProposal, SalesProposalSchema

SCHEMA_REGISTRY: Dict[str, BaseProposalSchema] = {
    schema.name: schema for schema in (SalesProposalSchema(), NarrativeProposalSchema())
}

SCHEMA_ALIASES: Dict[str, str] = {
    'default': 'sales_proposal',
    'sales': 'sales_proposal',
    'en': 'sales_proposal',
    'narrative': 'narrative_proposal_es',
    'es': 'narrative_proposal_es',
}

for _schema in SCHEMA_REGISTRY.values():
    _schema.check_pairing()


def get_schema(name: str) -> BaseProposalSchema:
    """Resolve a variant identifier or alias (case-insensitive)."""
    key = (name or '').strip().lower()
    key = SCHEMA_ALIASES.get(key, key)
    try:
        return SCHEMA_REGISTRY[key]
    except KeyError:
        raise UnknownSchemaVariant(name) from None


def list_schemas() -> List[dict]:
    """Describe every registered variant together with its aliases."""
    described = []
    for schema in SCHEMA_REGISTRY.values():
        entry = schema.describe()
        entry['aliases'] = sorted(alias for alias, target in SCHEMA_ALIASES.items() if target == schema.name)
        described.append(entry)
    return described


__all__ = [
    'BaseProposalSchema',
    'LIST_SHAPE',
    'NARRATIVE_SHAPE',
    'NarrativeProposal',
    'NarrativeProposalSchema',
    'SalesProposal',
    'SalesProposalSchema',
    'SCHEMA_ALIASES',
    'SCHEMA_REGISTRY',
    'get_schema',
    'list_schemas',
]
