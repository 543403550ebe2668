"""Spanish narrative schema: objectives, scope and solution as prose paragraphs."""

from typing import List, Optional, Type
from pydantic import BaseModel, Field
from .base import BaseProposalSchema, NARRATIVE_SHAPE


class NarrativeProposal(BaseModel):
    """Proposal summary written as Spanish prose about the client's project."""
    customer: str = Field(description="Nombre del cliente al que va dirigida la propuesta")
    industry: str = Field(description="Sector del cliente en español (p. ej., Seguros, Banca, Comercio minorista)")
    projectTitle: Optional[str] = Field(default=None, description="Título de la propuesta o del proyecto")
    date: Optional[str] = Field(default=None, description="Fecha de la propuesta")
    objectives: str = Field(description="Párrafo en español que describe los objetivos de negocio del cliente")
    scope: str = Field(description="Párrafo en español que describe el alcance del proyecto o de los servicios")
    technologies: List[str] = Field(description="Tecnologías, plataformas o herramientas propuestas, con nombres normalizados")
    solutionSummary: str = Field(description="Párrafo en español que resume la solución propuesta para el cliente")


class NarrativeProposalSchema(BaseProposalSchema):
    """Narrative Spanish extraction of a sales proposal."""

    name = "narrative_proposal_es"
    version = "1"
    language = "es"
    shape = NARRATIVE_SHAPE

    @property
    def schema_class(self) -> Type[BaseModel]:
        return NarrativeProposal

    @property
    def narrative_fields(self):
        return ("objectives", "scope", "solutionSummary")

    @property
    def prompt_template(self) -> str:
        return """Eres un experto en extraer información estructurada de propuestas comerciales.

Tu tarea es extraer lo siguiente:
1. El nombre del cliente.
2. El sector del cliente (p. ej., Seguros, Banca, Comercio minorista).
3. El título del proyecto y su versión, si existen.
4. La fecha de la propuesta.
5. Los objetivos del proyecto, redactados como un único párrafo en prosa (no como lista).
6. El alcance del proyecto, redactado como un único párrafo en prosa (no como lista).
7. Un resumen de la solución propuesta, redactado como un único párrafo en prosa.
8. Las tecnologías mencionadas, como lista de nombres.

Reglas:
- Escribe todo el texto narrativo en español, aunque el documento esté en otro idioma.
- Describe únicamente el proyecto y las necesidades del cliente. Omite la información que describe a la empresa que elabora la propuesta (su historia, sus oficinas, sus certificaciones, sus otros clientes).
- Normaliza los nombres de tecnologías y productos (p. ej., Power BI, JavaScript, .NET) y mantenlos en su forma original, sin traducir.
- Si un campo opcional no está disponible, omítelo.
Devuelve el resultado como JSON estructurado."""
