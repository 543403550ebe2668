"""Builds the message sequence sent to the extraction model."""

from typing import List

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from ..schemas.base import BaseProposalSchema

EXTRACTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{instructions}"),
    ("human", "{document_text}"),
])


def compose_messages(schema: BaseProposalSchema, document_text: str) -> List[BaseMessage]:
    """Return ``[system instructions, document text]`` for ``schema``.

    Values are substituted verbatim, so braces in the document are not
    treated as template variables and nothing is truncated.
    """
    return EXTRACTION_PROMPT.format_messages(
        instructions=schema.prompt_template,
        document_text=document_text,
    )
