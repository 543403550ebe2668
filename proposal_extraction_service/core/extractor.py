"""Structured extraction through a chat model bound to a schema variant."""

import logging
from typing import Any, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, ValidationError

from ..exceptions import ModelInvocationError
from ..schemas.base import BaseProposalSchema

logger = logging.getLogger(__name__)

# Most deterministic sampling setting.
TEMPERATURE = 0


class StructuredExtractor:
    """Invokes a chat model whose output must satisfy a variant's field contract."""

    def __init__(self,
                 model: str,
                 api_key: Optional[str] = None,
                 base_url: Optional[str] = None,
                 llm: Optional[BaseChatModel] = None):
        """
        Initialize the StructuredExtractor.

        Args:
            model: Model identifier, read from configuration by the caller
            api_key: API key; falls back to OPENAI_API_KEY when omitted
            base_url: Optional OpenAI-compatible endpoint
            llm: Pre-built chat model, used instead of constructing ChatOpenAI
        """
        self.model = model
        self.base_url = base_url

        if llm is not None:
            self.llm = llm
        else:
            kwargs = {"model": self.model, "temperature": TEMPERATURE}
            if api_key:
                kwargs["api_key"] = api_key
            if base_url:
                kwargs["base_url"] = base_url
            self.llm = ChatOpenAI(**kwargs)

    async def extract(self, messages: List[BaseMessage], schema: BaseProposalSchema) -> dict:
        """
        Run the model on ``messages`` and return a result conforming to ``schema``.

        Optional fields the model did not fill are omitted from the result.

        Raises:
            ModelInvocationError: On any backend failure or non-conforming output
        """
        try:
            structured_llm = self.llm.with_structured_output(
                schema.schema_class,
                method="function_calling",
            )
            result = await structured_llm.ainvoke(messages)
        except Exception as e:
            raise ModelInvocationError(f"Error invoking model {self.model}: {e}") from e

        instance = self._conform(result, schema)
        logger.info("Extracted %s v%s with model %s", schema.name, schema.version, self.model)
        return instance.model_dump(exclude_none=True)

    def _conform(self, result: Any, schema: BaseProposalSchema) -> BaseModel:
        if result is None:
            raise ModelInvocationError(f"Model {self.model} returned no {schema.name} object")

        schema_class = schema.schema_class
        try:
            if isinstance(result, schema_class):
                instance = result
            elif isinstance(result, BaseModel):
                instance = schema_class.model_validate(result.model_dump())
            else:
                instance = schema_class.model_validate(result)
        except ValidationError as e:
            raise ModelInvocationError(f"Model output does not match {schema.name}: {e}") from e

        missing = [name for name in schema.required_fields if getattr(instance, name, None) is None]
        if missing:
            raise ModelInvocationError(f"Model output for {schema.name} lacks required fields: {missing}")
        return instance

    def get_model_info(self) -> dict:
        """Get information about the configured model."""
        return {
            "model": self.model,
            "provider": "OpenAI",
            "base_url": self.base_url or "https://api.openai.com/v1",
            "temperature": TEMPERATURE,
        }
