"""Tests for prompt composition."""

from langchain_core.messages import HumanMessage, SystemMessage

from proposal_extraction_service.core.prompt_composer import compose_messages
from proposal_extraction_service.schemas import get_schema


def test_two_messages_in_order():
    schema = get_schema("sales_proposal")
    messages = compose_messages(schema, "Proposal text")

    assert len(messages) == 2
    assert isinstance(messages[0], SystemMessage)
    assert isinstance(messages[1], HumanMessage)
    assert messages[0].content == schema.prompt_template
    assert messages[1].content == "Proposal text"


def test_document_text_passes_through_verbatim():
    text = 'Budget: {"phase": 1} and {placeholder}\n' * 5000
    messages = compose_messages(get_schema("es"), text)

    assert messages[1].content == text


def test_instructions_follow_the_variant():
    english = compose_messages(get_schema("sales"), "x")[0].content
    spanish = compose_messages(get_schema("narrative"), "x")[0].content

    assert english != spanish
    assert "normalize technology names" in english
