"""English sales proposal schema with itemized objectives, scope and technologies."""

from typing import List, Optional, Type
from pydantic import BaseModel, Field
from .base import BaseProposalSchema, LIST_SHAPE


class SalesProposal(BaseModel):
    """Structured data extracted from a business sales proposal."""
    customer: str = Field(description="Name of the client or customer")
    industry: str = Field(description="Industry sector of the customer (e.g., Insurance, Banking, Retail)")
    projectTitle: Optional[str] = Field(default=None, description="Title of the sales proposal or project")
    date: Optional[str] = Field(default=None, description="Date of the proposal")
    objectives: List[str] = Field(description="List of project or business objectives described in the proposal")
    scope: List[str] = Field(description="Scope of the project or services to be provided")
    technologies: List[str] = Field(description="List of technologies, platforms, or tools proposed")
    solutionSummary: str = Field(description="Summary of the proposed solution")


class SalesProposalSchema(BaseProposalSchema):
    """Itemized English extraction of a sales proposal."""

    name = "sales_proposal"
    version = "1"
    language = "en"
    shape = LIST_SHAPE

    @property
    def schema_class(self) -> Type[BaseModel]:
        return SalesProposal

    @property
    def narrative_fields(self):
        return ("objectives", "scope")

    @property
    def prompt_template(self) -> str:
        return """You are an expert in extracting structured information from business sales proposals.

Your task is to extract the following:
1. The customer name.
2. The customer's industry (e.g., Insurance, Banking, Retail).
3. Project title and version if available.
4. The date of the proposal.
5. Project objectives and scope, each as a list of short, discrete items.
6. Summary of the proposed solution and the technologies mentioned.

Please normalize technology names (e.g., Power BI, JavaScript, .NET) and clean the extracted data. If a field is not available, omit it.
Return the result as structured JSON."""
