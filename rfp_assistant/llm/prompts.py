"""Prompt templates for RFP analysis tasks."""

from enum import Enum

from pydantic import BaseModel, Field


class TaskType(str, Enum):
    """Tasks the system can run against a corpus."""

    ANALYZE_SINGLE_RFP = "analyze_single_rfp"
    ANALYZE_MULTI_RFP = "analyze_multi_rfp"
    ANALYZE_MULTI_RFP_STRATEGIC = "analyze_multi_rfp_strategic"
    LIST_FILLABLE_FIELDS = "list_fillable_fields"
    FILL_AND_REFORMAT = "fill_and_reformat"
    DRAFT_RESPONSE = "draft_response"


class ProviderKind(str, Enum):
    """Text-generation providers."""

    OPENAI = "openai"
    GEMINI = "gemini"

    @property
    def display_name(self) -> str:
        """Name used in user-facing messages."""
        return {ProviderKind.OPENAI: "OpenAI", ProviderKind.GEMINI: "Gemini"}[self]


class TaskTemplate(BaseModel):
    """An immutable instruction pattern and its size limits.

    ``body`` is a format string with ``{corpus}`` and, for form filling,
    ``{field_responses}`` insertion points.
    """

    task_type: TaskType
    provider: ProviderKind = Field(default=ProviderKind.OPENAI)
    max_corpus_length: int = Field(..., gt=0, description="Corpus character budget")
    max_output_tokens: int = Field(..., gt=0, description="Generation token ceiling")
    system_prompt: str | None = Field(default=None)
    body: str = Field(..., min_length=1)
    failure_message: str = Field(
        default="Failed to process the request. Please try again later.",
        description="Shown to the user when the failure is not otherwise classified",
    )
    missing_input_message: str = Field(
        default="Input is required",
        description="Shown to the user when no document or URL was supplied",
    )

    @property
    def uses_fields(self) -> bool:
        """Whether the template renders form field responses."""
        return "{field_responses}" in self.body

    model_config = {"frozen": True}


class PromptTemplates:
    """Collection of prompt templates for RFP tasks."""

    SINGLE_RFP_SYSTEM_PROMPT = (
        "You are an expert at analyzing RFP (Request for Proposal) documents. "
        "Extract key information including what services/products are being requested, "
        "requirements, due dates, and submission guidelines. "
        "Be concise but comprehensive."
    )

    ANALYZE_SINGLE_RFP_TEMPLATE = """Please analyze this RFP content and provide a summary that includes:
1. What services/products are being requested
2. Key requirements and qualifications
3. Due date and submission deadline
4. Budget or value (if mentioned)
5. Key contact information
6. Important submission requirements

Content: {corpus}"""

    ANALYZE_MULTI_RFP_TEMPLATE = """Scan these RFP documents from the perspective of someone who is trying to win the bid from the government. Analyze ALL documents together and consolidate findings into three main topics. Do NOT organize by individual document names. Provide a comprehensive analysis formatted with **bold headers** and bullet points:

**Requirements for the Contract**
Consolidate all contract requirements from across all documents:
• [Detailed requirement 1 with specifics on how to meet it]
• [Detailed requirement 2 with specifics on how to meet it]
• [Detailed requirement 3 with specifics on how to meet it]
• [Additional requirements as needed]

**Evaluation Criteria that the Government is Evaluating On**
Consolidate all evaluation criteria from across all documents:
• [Evaluation criterion 1 with scoring/weighting and strategy to excel]
• [Evaluation criterion 2 with scoring/weighting and strategy to excel]
• [Evaluation criterion 3 with scoring/weighting and strategy to excel]
• [Additional criteria as needed]

**Deadlines**
Consolidate all deadlines and important dates from across all documents:
• [Critical deadline 1 with specific date, time, and what's due]
• [Critical deadline 2 with specific date, time, and what's due]
• [Critical deadline 3 with specific date, time, and what's due]
• [Additional deadlines as needed]

Focus on providing strategic insights that will help win this government contract. Synthesize information from all documents into these three consolidated sections.

RFP Content: {corpus}"""

    ANALYZE_MULTI_RFP_STRATEGIC_TEMPLATE = """CRITICAL ANALYSIS: Review these RFP documents with the critical lens of a competitive bidder who is determined to win this government contract. You must identify every advantage, risk, and strategic opportunity. Analyze ALL documents together and consolidate findings into three main topics. Do NOT organize by individual document names.

**Requirements for the Contract**
Consolidate all contract requirements from across all documents with a winning strategy focus:
• [Critical requirement 1: What's required + How to exceed expectations + Competitive advantage opportunities]
• [Critical requirement 2: What's required + How to exceed expectations + Competitive advantage opportunities]
• [Critical requirement 3: What's required + How to exceed expectations + Competitive advantage opportunities]
• [Additional requirements with strategic insights]

**Evaluation Criteria that the Government is Evaluating On**
Consolidate all evaluation criteria with scoring intelligence and winning tactics:
• [Evaluation criterion 1: Scoring/weighting + What wins points + How to maximize score + Common competitor weaknesses]
• [Evaluation criterion 2: Scoring/weighting + What wins points + How to maximize score + Common competitor weaknesses]
• [Evaluation criterion 3: Scoring/weighting + What wins points + How to maximize score + Common competitor weaknesses]
• [Additional criteria with tactical insights]

**Deadlines**
Consolidate all critical deadlines with strategic timing considerations:
• [Critical deadline 1: Date/time + What's due + Strategic preparation timeline + Risk mitigation]
• [Critical deadline 2: Date/time + What's due + Strategic preparation timeline + Risk mitigation]
• [Critical deadline 3: Date/time + What's due + Strategic preparation timeline + Risk mitigation]
• [Additional deadlines with strategic timing insights]

WINNING MINDSET: Provide insights that give this bidder a competitive edge. Identify what the government truly values, where competitors typically fail, and how to position for maximum scoring advantage.

RFP Content: {corpus}"""

    LIST_FILLABLE_FIELDS_TEMPLATE = """Analyze these RFP package documents to identify all items that need to be filled out by the bidder. Look for:
- Questions (anything with a question mark ?)
- Checkboxes ([ ] or ☐)
- Form fields with colons followed by blank lines or underscores (:______)
- Signature lines
- Date fields
- Any other fields requiring bidder input

**Requirements for Completion**

Organize your findings by document and list each fillable item:

**[Document Name 1]**
• [Question or field description]: [Type of response needed]
• [Question or field description]: [Type of response needed]
• [Question or field description]: [Type of response needed]

**[Document Name 2]**
• [Question or field description]: [Type of response needed]
• [Question or field description]: [Type of response needed]

Use **bold** formatting for document names. Be thorough and specific about what type of response is needed for each field (text, date, signature, checkbox, etc.).

Content: {corpus}"""

    FILL_AND_REFORMAT_TEMPLATE = """Convert these RFP attachment documents to text with clean formatting. FILL IN all empty fields and blank lines using the form field responses provided:

**FORM FIELD RESPONSES TO USE:**
{field_responses}

**DOCUMENT CONTENT:**
{corpus}

**INSTRUCTIONS:**
- Clean up the formatting to remove floating letters or words that appear in isolated paragraphs
- Use **bold** ONLY for major section headers and form field labels that need responses
- Do NOT bold regular content, certifications, legal requirements, or list items
- Use bullet points (•) for lists of items, certifications, and requirements
- Group related content together into coherent paragraphs
- FILL IN all blank lines, empty fields, and spaces after colons (:) with the appropriate responses from the form fields
- When you see "Name of Authorized Representative:" or similar, fill it with the value from "Name of Authorized Representative" field
- When you see "Title:" fill it with the value from "Title" field
- When you see "Date:" fill it with the value from "Date" field
- When you see "Signature:" fill it with the appropriate name from the form fields
- For Yes/No questions, use the exact response provided (Yes or No)
- Leave checkboxes as [ ] without adding any check marks unless a specific checkbox response is provided
- Match form field names to document field requests intelligently (e.g., "Name of Offerer/Bidder Firm" matches requests for company name, bidder name, etc.)
- Maintain logical structure but eliminate awkward spacing and orphaned text
- Ensure each paragraph contains complete thoughts and sentences

**EXAMPLE OF PROPER FORMATTING:**
Items like "Affirmation of Understanding of and Agreement pursuant to State Finance Law §139-j (3) and §139-j (6) (b)" should be formatted as bullet points, NOT bolded:
• Affirmation of Understanding of and Agreement pursuant to State Finance Law §139-j (3) and §139-j (6) (b)
• Offerer's Certification of Compliance with State Finance Law §139-k(5)
• Offerer Disclosure of Prior Non-Responsibility Determinations"""

    DRAFT_RESPONSE_TEMPLATE = """Read through the uploaded RFP documents with a critical eye and in the lens of a bidder to draft an RFP response. Use a professional RFP response template structure with these sections:

**Executive Summary**
Provide a compelling overview of your proposal and why you're the best choice for this contract.

**Company Overview**
Brief description of your company, experience, and qualifications relevant to this RFP.

**Understanding of Requirements**
Demonstrate your understanding of the project requirements and scope of work.

**Proposed Solution**
Detail your approach to meeting the requirements, including methodology, timeline, and deliverables.

**Team and Qualifications**
Highlight your team's experience and qualifications relevant to this project.

**Pricing and Budget**
Provide pricing structure and budget breakdown (use placeholder information if specific pricing isn't available).

**Timeline and Milestones**
Propose a realistic timeline with key milestones and deliverables.

**Risk Management**
Identify potential risks and your mitigation strategies.

**Conclusion**
Summarize why you're the best choice and reinforce your value proposition.

Use the details from the RFP documents to craft relevant, specific content for each section. Be professional, compelling, and demonstrate clear understanding of the requirements.

RFP Content: {corpus}"""

    @classmethod
    def build_templates(cls) -> dict[TaskType, TaskTemplate]:
        templates = [
            TaskTemplate(
                task_type=TaskType.ANALYZE_SINGLE_RFP,
                max_corpus_length=8000,
                max_output_tokens=500,
                system_prompt=cls.SINGLE_RFP_SYSTEM_PROMPT,
                body=cls.ANALYZE_SINGLE_RFP_TEMPLATE,
                failure_message="Failed to analyze the RFP. Please try again later.",
                missing_input_message="URL is required",
            ),
            TaskTemplate(
                task_type=TaskType.ANALYZE_MULTI_RFP,
                max_corpus_length=12000,
                max_output_tokens=1500,
                body=cls.ANALYZE_MULTI_RFP_TEMPLATE,
                failure_message="Failed to analyze the PDF. Please try again later.",
                missing_input_message="PDF file is required",
            ),
            TaskTemplate(
                task_type=TaskType.ANALYZE_MULTI_RFP_STRATEGIC,
                max_corpus_length=15000,
                max_output_tokens=1500,
                body=cls.ANALYZE_MULTI_RFP_STRATEGIC_TEMPLATE,
                failure_message="Failed to analyze the RFP files. Please try again later.",
                missing_input_message="RFP files are required",
            ),
            TaskTemplate(
                task_type=TaskType.LIST_FILLABLE_FIELDS,
                max_corpus_length=15000,
                max_output_tokens=1500,
                body=cls.LIST_FILLABLE_FIELDS_TEMPLATE,
                failure_message="Failed to analyze the attachments. Please try again later.",
                missing_input_message="At least one attachment file is required",
            ),
            TaskTemplate(
                task_type=TaskType.FILL_AND_REFORMAT,
                provider=ProviderKind.GEMINI,
                max_corpus_length=30000,
                max_output_tokens=4000,
                body=cls.FILL_AND_REFORMAT_TEMPLATE,
                failure_message="Failed to convert attachments to text. Please try again later.",
                missing_input_message="RFP attachments are required",
            ),
            TaskTemplate(
                task_type=TaskType.DRAFT_RESPONSE,
                max_corpus_length=15000,
                max_output_tokens=2000,
                body=cls.DRAFT_RESPONSE_TEMPLATE,
                failure_message="Failed to generate draft response. Please try again later.",
                missing_input_message="RFP files are required",
            ),
        ]
        return {template.task_type: template for template in templates}

    @classmethod
    def get_template(cls, task_type: TaskType) -> TaskTemplate:
        """Get the template registered for a task."""
        return TASK_TEMPLATES[TaskType(task_type)]

    @classmethod
    def all_templates(cls) -> list[TaskTemplate]:
        """Get every registered template, in task order."""
        return [cls.get_template(task_type) for task_type in TaskType]


TASK_TEMPLATES: dict[TaskType, TaskTemplate] = PromptTemplates.build_templates()
