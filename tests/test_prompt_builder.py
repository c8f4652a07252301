import json

from prompt_builder import build_output_instructions, build_prompt
from schemas import Medication


def test_prompt_lists_every_medication_in_order():
    prompt = build_prompt([
        Medication(name="Warfarin", dosage="5mg"),
        Medication(name="Aspirin", dosage="81mg"),
    ])
    assert prompt.startswith("You are a clinical pharmacist expert.")
    assert prompt.endswith(
        "Medications:\n"
        "- Name: Warfarin, Dosage: 5mg\n"
        "- Name: Aspirin, Dosage: 81mg\n"
    )


def test_output_instructions_declare_summary_field():
    instructions = build_output_instructions()
    schema = json.loads(instructions[instructions.index("{"):])
    assert schema["required"] == ["summary"]
    assert schema["properties"]["summary"]["type"] == "string"
