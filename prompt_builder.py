"""
Render the interaction-analysis prompt

Purpose: format the medication list and task instructions into the prompt sent to the LLM.

Input: ordered list of Medication (name, dosage).

Output: prompt_text: str ready to send to the LLM, plus the system instruction declaring the output shape.

Example: [Medication(name="Warfarin", dosage="5mg")] → prompt ending with
"Medications:\n- Name: Warfarin, Dosage: 5mg\n"
"""
import json
from typing import Sequence

from schemas import InteractionSummary, Medication

TASK_INSTRUCTIONS = (
    "You are a clinical pharmacist expert. Analyze the following list of medications and dosages "
    "for potential drug interactions, side effects, and necessary precautions. "
    "Provide a concise summary of your analysis. "
    "Use the provided output schema description for output formatting."
)


def build_prompt(medications: Sequence[Medication]) -> str:
    lines = [TASK_INSTRUCTIONS, "", "Medications:"]
    for med in medications:
        lines.append(f"- Name: {med.name}, Dosage: {med.dosage}")
    return "\n".join(lines) + "\n"


def build_output_instructions() -> str:
    """System instruction that pins the response to the InteractionSummary shape."""
    schema = InteractionSummary.model_json_schema()
    return (
        "Respond ONLY with a valid JSON object, no markdown or extra text, "
        "matching this JSON schema:\n"
        f"{json.dumps(schema, indent=2)}"
    )
