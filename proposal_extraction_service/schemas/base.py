"""Base schema definition for proposal extraction."""

import typing
from abc import ABC, abstractmethod
from typing import List, Tuple, Type

from pydantic import BaseModel

LIST_SHAPE = "list"
NARRATIVE_SHAPE = "narrative"


class BaseProposalSchema(ABC):
    """A field contract paired with the instructions that populate it.

    The pydantic class and the prompt text are one versioned unit: bump
    ``version`` whenever either of them changes.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier. The structured-output tool is named after ``schema_class``."""
        pass

    @property
    @abstractmethod
    def version(self) -> str:
        pass

    @property
    @abstractmethod
    def language(self) -> str:
        """Language of the free text the model is asked to write."""
        pass

    @property
    @abstractmethod
    def shape(self) -> str:
        """Either ``"list"`` or ``"narrative"``."""
        pass

    @property
    @abstractmethod
    def schema_class(self) -> Type[BaseModel]:
        """Return the Pydantic schema class."""
        pass

    @property
    @abstractmethod
    def prompt_template(self) -> str:
        """Return the extraction instructions sent as the system message."""
        pass

    @property
    def narrative_fields(self) -> Tuple[str, ...]:
        """Fields whose type follows the variant shape (item list vs. paragraph)."""
        return ()

    @property
    def required_fields(self) -> List[str]:
        return [
            field_name
            for field_name, field in self.schema_class.model_fields.items()
            if field.is_required()
        ]

    def check_pairing(self) -> None:
        """Raise ``TypeError`` if the field contract disagrees with the variant shape."""
        if self.shape == LIST_SHAPE:
            expected = List[str]
        elif self.shape == NARRATIVE_SHAPE:
            expected = str
        else:
            raise TypeError(f"{self.name}: unknown shape {self.shape!r}")

        fields = self.schema_class.model_fields
        for field_name in self.narrative_fields:
            if field_name not in fields:
                raise TypeError(f"{self.name}: field {field_name!r} is not in {self.schema_class.__name__}")
            annotation = _strip_optional(fields[field_name].annotation)
            if not _same_type(annotation, expected):
                raise TypeError(
                    f"{self.name}: field {field_name!r} is {annotation!r} "
                    f"but a {self.shape}-shaped variant needs {expected!r}"
                )

    def describe(self) -> dict:
        return {
            "name": self.name,
            "version": self.version,
            "language": self.language,
            "shape": self.shape,
            "required_fields": self.required_fields,
        }


def _strip_optional(annotation):
    if typing.get_origin(annotation) is typing.Union:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _same_type(annotation, expected) -> bool:
    if expected is str:
        return annotation is str
    return typing.get_origin(annotation) is list and typing.get_args(annotation) == (str,)
